"""Domain models for foods and favorites."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class FoodCategory(StrEnum):
    """Food categories."""

    FRUITS = "fruits"
    VEGETABLES = "vegetables"
    PROTEINS = "proteins"
    GRAINS = "grains"
    DAIRY = "dairy"
    FATS = "fats"
    BEVERAGES = "beverages"
    SNACKS = "snacks"
    CUSTOM = "custom"

    @property
    def is_liquid(self) -> bool:
        """Return True when servings are measured in milliliters."""
        return self in _LIQUID_CATEGORIES

    @property
    def base_unit(self) -> "QuantityUnit":
        """Return the physical unit a serving of this category is measured in."""
        return QuantityUnit.ML if self.is_liquid else QuantityUnit.G


_LIQUID_CATEGORIES = frozenset({FoodCategory.BEVERAGES})


class QuantityUnit(StrEnum):
    """Units a logged quantity can be expressed in."""

    G = "g"
    ML = "ml"
    SERVING = "serving"

    @property
    def label(self) -> str:
        """Human-readable unit name."""
        return _UNIT_LABELS[self]


_UNIT_LABELS = {
    QuantityUnit.SERVING: "Servings",
    QuantityUnit.G: "Grams (g)",
    QuantityUnit.ML: "Milliliters (ml)",
}


@dataclass(frozen=True)
class FoodNutritionFacts:
    """Nutrition facts for exactly ``serving_grams`` grams (or ml) of a food."""

    calories_per_serving: float
    protein_grams: float
    carbs_grams: float
    fat_grams: float
    serving_grams: float
    category: FoodCategory = FoodCategory.CUSTOM


@dataclass(frozen=True)
class FoodRecord:
    """Food row, either a shared system food or a user's custom food."""

    id: UUID
    name: str
    category: FoodCategory
    calories_per_serving: float
    protein_grams: float
    carbs_grams: float
    fat_grams: float
    serving_size: str
    serving_grams: float
    is_system_food: bool
    created_by: UUID | None
    created_at: datetime | None = None

    @property
    def facts(self) -> FoodNutritionFacts:
        """Nutrition facts used by the quantity converter."""
        return FoodNutritionFacts(
            calories_per_serving=self.calories_per_serving,
            protein_grams=self.protein_grams,
            carbs_grams=self.carbs_grams,
            fat_grams=self.fat_grams,
            serving_grams=self.serving_grams,
            category=self.category,
        )

    def is_visible_to(self, user_id: UUID) -> bool:
        """Return True when the user may read this food."""
        return self.is_system_food or self.created_by == user_id

    def is_owned_by(self, user_id: UUID) -> bool:
        """Return True when the user may edit or delete this food."""
        return not self.is_system_food and self.created_by == user_id


@dataclass(frozen=True)
class FavoriteRecord:
    """A food the user marked as favorite."""

    id: UUID
    user_id: UUID
    food_id: UUID
    created_at: datetime | None = None
    food: FoodRecord | None = None
