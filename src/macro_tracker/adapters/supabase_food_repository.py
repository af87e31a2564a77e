"""Supabase repository for the food catalog."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from macro_tracker.domain.foods import FoodCategory, FoodRecord
from macro_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for system and custom foods."""

    client: Client

    def search_foods(
        self, user_id: UUID, query: str | None, category: FoodCategory | None
    ) -> list[FoodRecord]:
        """Return system foods and the user's own foods matching filters."""
        builder = (
            self.client.table("foods")
            .select("*")
            .or_(f"is_system_food.eq.true,created_by.eq.{user_id}")
        )
        if query:
            builder = builder.ilike("name", f"%{query}%")
        if category is not None:
            builder = builder.eq("category", category.value)
        response = builder.order("name", desc=False).execute()
        return [parse_food(row) for row in response.data or []]

    def get_food(self, food_id: UUID) -> FoodRecord | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food(response.data[0])

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> FoodRecord:
        """Create a custom food and return it."""
        response = (
            self.client.table("foods")
            .insert({**_serialize(payload), "created_by": str(user_id)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        return parse_food(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodRecord:
        """Update a food and return it."""
        response = (
            self.client.table("foods")
            .update(_serialize(payload))
            .eq("id", str(food_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food")
        return parse_food(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food."""
        self.client.table("foods").delete().eq("id", str(food_id)).execute()


def _serialize(payload: dict[str, object]) -> dict[str, object]:
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in payload.items()
    }


def parse_food(row: dict[str, object]) -> FoodRecord:
    """Parse a food row into a domain model."""
    created_raw = row.get("created_at")
    created_by = row.get("created_by")
    return FoodRecord(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        category=FoodCategory(row.get("category") or FoodCategory.CUSTOM),
        calories_per_serving=float(row.get("calories_per_serving", 0.0)),
        protein_grams=float(row.get("protein_grams", 0.0)),
        carbs_grams=float(row.get("carbs_grams", 0.0)),
        fat_grams=float(row.get("fat_grams", 0.0)),
        serving_size=str(row.get("serving_size") or "100g"),
        serving_grams=float(row.get("serving_grams") or 100.0),
        is_system_food=bool(row.get("is_system_food", False)),
        created_by=UUID(created_by) if created_by else None,
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
