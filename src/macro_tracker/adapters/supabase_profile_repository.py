"""Supabase repository for profiles."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from macro_tracker.domain.profiles import (
    ActivityLevel,
    Gender,
    GoalType,
    ProfileRecord,
    UnitSystem,
)
from macro_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> ProfileRecord | None:
        """Return the user's profile row, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(
        self, user_id: UUID, updates: dict[str, object]
    ) -> ProfileRecord:
        """Update the user's profile row and return it."""
        response = (
            self.client.table("profiles")
            .update(_serialize(updates))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile")
        return _parse_profile(response.data[0])


def _serialize(updates: dict[str, object]) -> dict[str, object]:
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in updates.items()
    }


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _optional_int(value: object) -> int | None:
    if value is None:
        return None
    return int(value)


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def _parse_profile(row: dict[str, object]) -> ProfileRecord:
    gender_raw = row.get("gender")
    return ProfileRecord(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=row.get("name"),
        age=_optional_int(row.get("age")),
        gender=Gender(gender_raw) if gender_raw else None,
        current_weight=_optional_float(row.get("current_weight")),
        height=_optional_float(row.get("height")),
        target_weight=_optional_float(row.get("target_weight")),
        goal_type=GoalType(row.get("goal_type") or GoalType.MAINTAIN),
        activity_level=ActivityLevel(
            row.get("activity_level") or ActivityLevel.MODERATELY_ACTIVE
        ),
        daily_calorie_target=_optional_int(row.get("daily_calorie_target")),
        daily_protein_target=_optional_int(row.get("daily_protein_target")),
        daily_carbs_target=_optional_int(row.get("daily_carbs_target")),
        daily_fat_target=_optional_int(row.get("daily_fat_target")),
        unit_system=UnitSystem(row.get("unit_system") or UnitSystem.METRIC),
        onboarding_completed=bool(row.get("onboarding_completed", False)),
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )
