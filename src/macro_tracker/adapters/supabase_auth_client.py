"""Supabase Auth client used to identify API callers."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

import httpx

_logger = logging.getLogger(__name__)

_REJECTED_STATUSES = {401, 403}


class IdentityProvider(Protocol):
    """Resolves an access token to a stable user id."""

    async def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a token, or None if the token is rejected."""


@dataclass
class HttpxSupabaseAuthClient(IdentityProvider):
    """Supabase Auth ``/user`` lookup implemented with httpx."""

    base_url: str
    api_key: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, api_key: str, timeout_seconds: float = 10.0
    ) -> "HttpxSupabaseAuthClient":
        """Create an auth client with a managed httpx session."""
        return cls(
            base_url=base_url,
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def get_user_id(self, access_token: str) -> UUID | None:
        """Look up the user behind an access token."""
        response = await self.http_client.get(
            f"{self.base_url}/user",
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {access_token}",
            },
            timeout=self.timeout_seconds,
        )
        if response.status_code in _REJECTED_STATUSES:
            _logger.info("Access token rejected: status=%s", response.status_code)
            return None
        response.raise_for_status()
        user_id = response.json().get("id")
        if not user_id:
            return None
        return UUID(user_id)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
