"""Supabase repository for meal logs."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from macro_tracker.adapters.supabase_food_repository import parse_food
from macro_tracker.domain.meals import MealLogRecord, MealType
from macro_tracker.services.meals import MealLogRepository

_SELECT = "*, food:foods(*)"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal logs."""

    client: Client

    def create_meal_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> MealLogRecord:
        """Insert a meal log row and return it."""
        response = (
            self.client.table("meal_logs")
            .insert({"user_id": str(user_id), **_serialize(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_log(response.data[0])

    def list_meal_logs(self, user_id: UUID, logged_date: date) -> list[MealLogRecord]:
        """Return a user's entries for a date with their foods."""
        response = (
            self.client.table("meal_logs")
            .select(_SELECT)
            .eq("user_id", str(user_id))
            .eq("logged_date", logged_date.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def get_meal_log(self, user_id: UUID, log_id: UUID) -> MealLogRecord | None:
        """Return one of the user's entries."""
        response = (
            self.client.table("meal_logs")
            .select(_SELECT)
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def update_meal_log(
        self, user_id: UUID, log_id: UUID, payload: dict[str, object]
    ) -> MealLogRecord:
        """Update one of the user's entries."""
        response = (
            self.client.table("meal_logs")
            .update(_serialize(payload))
            .eq("id", str(log_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal log")
        return _parse_log(response.data[0])

    def delete_meal_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete one of the user's entries."""
        self.client.table("meal_logs").delete().eq("id", str(log_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _serialize(payload: dict[str, object]) -> dict[str, object]:
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in payload.items()
    }


def _parse_log(row: dict[str, object]) -> MealLogRecord:
    created_raw = row.get("created_at")
    food_row = row.get("food")
    return MealLogRecord(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        food_id=UUID(row["food_id"]),
        meal_type=MealType(row["meal_type"]),
        servings=float(row.get("servings", 1.0)),
        calories=int(row.get("calories", 0)),
        protein=float(row.get("protein", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        logged_date=date.fromisoformat(str(row["logged_date"])),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
        food=parse_food(food_row) if isinstance(food_row, dict) else None,
    )
