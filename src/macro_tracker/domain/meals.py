"""Domain models for meal logging."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from macro_tracker.domain.foods import FoodRecord


class MealType(StrEnum):
    """Meal slot an entry is logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class MealLogRecord:
    """A single logged food entry."""

    id: UUID
    user_id: UUID
    food_id: UUID
    meal_type: MealType
    servings: float
    calories: int
    protein: float
    carbs: float
    fat: float
    logged_date: date
    created_at: datetime | None = None
    food: FoodRecord | None = None


@dataclass(frozen=True)
class DailyNutrition:
    """Summed nutrition for a set of entries."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DayLog:
    """Entries logged on one date."""

    logged_date: date
    entries: list[MealLogRecord]
    totals: DailyNutrition
    by_meal_type: dict[MealType, list[MealLogRecord]] = field(default_factory=dict)
