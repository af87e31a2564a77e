"""Services for the food catalog and custom foods."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.foods import FoodCategory, FoodRecord, QuantityUnit
from macro_tracker.domain.nutrition import (
    CalculationBreakdown,
    MacroCheck,
    NutritionResult,
)
from macro_tracker.services.quantities import (
    compute_nutrition_for_quantity,
    get_calculation_breakdown,
    validate_macro_calorie_match,
)

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for foods."""

    def search_foods(
        self, user_id: UUID, query: str | None, category: FoodCategory | None
    ) -> list[FoodRecord]:
        """Return system foods and the user's foods matching the filters."""

    def get_food(self, food_id: UUID) -> FoodRecord | None:
        """Return a food by id, if present."""

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> FoodRecord:
        """Create a custom food owned by the user."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodRecord:
        """Update a food and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food."""


@dataclass(frozen=True)
class CustomFoodResult:
    """A created or updated custom food with its macro consistency check."""

    food: FoodRecord
    check: MacroCheck


@dataclass(frozen=True)
class NutritionPreview:
    """Nutrition for a quantity of a food, with its breakdown."""

    food: FoodRecord
    nutrition: NutritionResult
    breakdown: CalculationBreakdown


@dataclass
class FoodService:
    """Application service for foods."""

    repository: FoodRepository

    def search(
        self,
        user_id: UUID,
        query: str | None = None,
        category: FoodCategory | None = None,
    ) -> list[FoodRecord]:
        """Search visible foods, ordered by name."""
        cleaned = query.strip() if query else None
        foods = self.repository.search_foods(user_id, cleaned or None, category)
        return sorted(
            (food for food in foods if food.is_visible_to(user_id)),
            key=lambda food: food.name.lower(),
        )

    def get_food(self, user_id: UUID, food_id: UUID) -> FoodRecord | None:
        """Return a food if the user can see it."""
        food = self.repository.get_food(food_id)
        if food is None or not food.is_visible_to(user_id):
            return None
        return food

    def create_custom_food(
        self, user_id: UUID, payload: dict[str, object]
    ) -> CustomFoodResult:
        """Create a custom food; a macro mismatch is reported, not rejected."""
        food = self.repository.create_food(
            user_id,
            {**payload, "created_by": str(user_id), "is_system_food": False},
        )
        return CustomFoodResult(food=food, check=_check_food(food))

    def update_food(
        self, user_id: UUID, food_id: UUID, payload: dict[str, object]
    ) -> CustomFoodResult | None:
        """Update one of the user's custom foods."""
        current = self.repository.get_food(food_id)
        if current is None or not current.is_owned_by(user_id):
            return None
        allowed = {
            key: value
            for key, value in payload.items()
            if key not in {"id", "created_by", "is_system_food", "created_at"}
        }
        food = self.repository.update_food(food_id, allowed)
        return CustomFoodResult(food=food, check=_check_food(food))

    def delete_food(self, user_id: UUID, food_id: UUID) -> bool:
        """Delete one of the user's custom foods."""
        current = self.repository.get_food(food_id)
        if current is None or not current.is_owned_by(user_id):
            return False
        self.repository.delete_food(food_id)
        return True

    def preview(
        self, user_id: UUID, food_id: UUID, quantity: float, unit: QuantityUnit
    ) -> NutritionPreview | None:
        """Compute nutrition for a quantity without logging it."""
        food = self.get_food(user_id, food_id)
        if food is None:
            return None
        return NutritionPreview(
            food=food,
            nutrition=compute_nutrition_for_quantity(food.facts, quantity, unit),
            breakdown=get_calculation_breakdown(food.facts, quantity, unit),
        )


def _check_food(food: FoodRecord) -> MacroCheck:
    check = validate_macro_calorie_match(
        food.calories_per_serving,
        food.protein_grams,
        food.carbs_grams,
        food.fat_grams,
    )
    if not check.is_valid:
        _logger.warning(
            "Custom food macros disagree with calories: food_id=%s "
            "stated=%s calculated=%s",
            food.id,
            food.calories_per_serving,
            check.calculated_calories,
        )
    return check
