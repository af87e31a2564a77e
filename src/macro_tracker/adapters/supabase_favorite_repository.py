"""Supabase repository for favorite foods."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.supabase_food_repository import parse_food
from macro_tracker.domain.foods import FavoriteRecord
from macro_tracker.services.favorites import FavoriteRepository


@dataclass
class SupabaseFavoriteRepository(FavoriteRepository):
    """Supabase implementation for favorites."""

    client: Client

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecord]:
        """Return the user's favorites with their foods, newest first."""
        response = (
            self.client.table("user_favorites")
            .select("*, food:foods(*)")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_favorite(row) for row in response.data or []]

    def add_favorite(self, user_id: UUID, food_id: UUID) -> FavoriteRecord:
        """Insert a favorite row."""
        response = (
            self.client.table("user_favorites")
            .insert({"user_id": str(user_id), "food_id": str(food_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add favorite")
        return _parse_favorite(response.data[0])

    def remove_favorite(self, user_id: UUID, food_id: UUID) -> None:
        """Delete a favorite row."""
        self.client.table("user_favorites").delete().eq("user_id", str(user_id)).eq(
            "food_id", str(food_id)
        ).execute()


def _parse_favorite(row: dict[str, object]) -> FavoriteRecord:
    created_raw = row.get("created_at")
    food_row = row.get("food")
    return FavoriteRecord(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        food_id=UUID(row["food_id"]),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
    )
