"""Meal logging service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.foods import QuantityUnit
from macro_tracker.domain.meals import DailyNutrition, DayLog, MealLogRecord, MealType
from macro_tracker.domain.nutrition import NutritionResult
from macro_tracker.services.errors import FoodNotFoundError
from macro_tracker.services.foods import FoodRepository
from macro_tracker.services.quantities import (
    compute_nutrition_for_quantity,
    quantity_in_servings,
)


class MealLogRepository(Protocol):
    """Persistence interface for meal logs."""

    def create_meal_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> MealLogRecord:
        """Create a meal log entry and return it."""

    def list_meal_logs(self, user_id: UUID, logged_date: date) -> list[MealLogRecord]:
        """Return a user's entries for a date, oldest first."""

    def get_meal_log(self, user_id: UUID, log_id: UUID) -> MealLogRecord | None:
        """Return one of the user's entries."""

    def update_meal_log(
        self, user_id: UUID, log_id: UUID, payload: dict[str, object]
    ) -> MealLogRecord:
        """Update an entry and return it."""

    def delete_meal_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete an entry."""


@dataclass
class MealLogService:
    """Service that converts quantities and persists meal log entries."""

    food_repository: FoodRepository
    repository: MealLogRepository

    def log_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        meal_type: MealType,
        quantity: float,
        unit: QuantityUnit,
        logged_date: date,
    ) -> MealLogRecord:
        """Compute nutrition for a quantity of food and log it."""
        food = self.food_repository.get_food(food_id)
        if food is None or not food.is_visible_to(user_id):
            raise FoodNotFoundError(str(food_id))
        nutrition = compute_nutrition_for_quantity(food.facts, quantity, unit)
        payload = {
            "food_id": str(food_id),
            "meal_type": meal_type,
            "servings": quantity_in_servings(quantity, unit, food.serving_grams),
            "logged_date": logged_date.isoformat(),
            **_nutrition_fields(nutrition),
        }
        return self.repository.create_meal_log(user_id, payload)

    def get_day(self, user_id: UUID, logged_date: date) -> DayLog:
        """Return a day's entries with totals and per-meal grouping."""
        entries = self.repository.list_meal_logs(user_id, logged_date)
        return DayLog(
            logged_date=logged_date,
            entries=entries,
            totals=sum_nutrition(entries),
            by_meal_type={
                meal_type: [entry for entry in entries if entry.meal_type == meal_type]
                for meal_type in MealType
            },
        )

    def update_entry(
        self,
        user_id: UUID,
        log_id: UUID,
        quantity: float | None = None,
        unit: QuantityUnit | None = None,
        meal_type: MealType | None = None,
    ) -> MealLogRecord | None:
        """Change an entry's meal slot or quantity, recomputing nutrition."""
        entry = self.repository.get_meal_log(user_id, log_id)
        if entry is None:
            return None
        payload: dict[str, object] = {}
        if meal_type is not None:
            payload["meal_type"] = meal_type
        if quantity is not None:
            food = self.food_repository.get_food(entry.food_id)
            if food is None:
                raise FoodNotFoundError(str(entry.food_id))
            resolved_unit = unit or QuantityUnit.SERVING
            nutrition = compute_nutrition_for_quantity(
                food.facts, quantity, resolved_unit
            )
            payload["servings"] = quantity_in_servings(
                quantity, resolved_unit, food.serving_grams
            )
            payload.update(_nutrition_fields(nutrition))
        if not payload:
            return entry
        return self.repository.update_meal_log(user_id, log_id, payload)

    def delete_entry(self, user_id: UUID, log_id: UUID) -> bool:
        """Delete one of the user's entries."""
        if self.repository.get_meal_log(user_id, log_id) is None:
            return False
        self.repository.delete_meal_log(user_id, log_id)
        return True


def sum_nutrition(entries: list[MealLogRecord]) -> DailyNutrition:
    """Sum calories and macros across entries."""
    return DailyNutrition(
        calories=sum(entry.calories for entry in entries),
        protein=sum(entry.protein for entry in entries),
        carbs=sum(entry.carbs for entry in entries),
        fat=sum(entry.fat for entry in entries),
    )


def _nutrition_fields(nutrition: NutritionResult) -> dict[str, object]:
    return {
        "calories": nutrition.calories,
        "protein": nutrition.protein_grams,
        "carbs": nutrition.carbs_grams,
        "fat": nutrition.fat_grams,
    }
