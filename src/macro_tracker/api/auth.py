"""Bearer token authentication for user-scoped endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

import httpx
from fastapi import Header, HTTPException, Request, status

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

_logger = logging.getLogger(__name__)


def _parse_bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_user_id(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the caller's user id from the Authorization header."""
    token = _parse_bearer(authorization)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    container: AppContainer = request.app.state.container
    try:
        user_id = await container.identity_provider.get_user_id(token)
    except httpx.HTTPError as exc:
        _logger.exception("Identity lookup failed")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE) from exc
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user_id
