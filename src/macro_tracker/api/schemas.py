"""Pydantic models for API request payloads."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from macro_tracker.domain.foods import FoodCategory, QuantityUnit
from macro_tracker.domain.meals import MealType
from macro_tracker.domain.profiles import (
    ActivityLevel,
    BodyProfile,
    Gender,
    GoalType,
    OnboardingData,
    UnitSystem,
)

MAX_QUANTITY = 100_000


class BodyProfileRequest(BaseModel):
    """Metric body inputs for a stateless target calculation."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age_years: int = Field(gt=0)
    gender: Gender
    activity_level: ActivityLevel
    goal_type: GoalType

    def to_domain(self) -> BodyProfile:
        """Convert to the calculator input."""
        return BodyProfile(**self.model_dump())


class OnboardingRequest(BaseModel):
    """Onboarding answers."""

    name: str = Field(min_length=1, max_length=100)
    age: int = Field(gt=0, le=120)
    gender: Gender
    current_weight: float = Field(gt=0)
    height: float = Field(gt=0)
    target_weight: float = Field(gt=0)
    goal_type: GoalType
    activity_level: ActivityLevel
    unit_system: UnitSystem = UnitSystem.METRIC

    def to_domain(self) -> OnboardingData:
        """Convert to the onboarding domain model."""
        return OnboardingData(**self.model_dump())


class ProfileUpdateRequest(BaseModel):
    """Partial profile update.

    Fields the calculator needs may be omitted but not cleared.
    """

    name: str | None = Field(default=None, max_length=100)
    age: int | None = Field(default=None, gt=0, le=120)
    gender: Gender | None = None
    current_weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    target_weight: float | None = Field(default=None, gt=0)
    goal_type: GoalType | None = None
    activity_level: ActivityLevel | None = None
    unit_system: UnitSystem | None = None

    @field_validator(
        "age",
        "gender",
        "current_weight",
        "height",
        "goal_type",
        "activity_level",
        "unit_system",
    )
    @classmethod
    def _reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("must not be null")
        return value


class FoodCreateRequest(BaseModel):
    """Custom food payload."""

    name: str = Field(min_length=1, max_length=100)
    category: FoodCategory = FoodCategory.CUSTOM
    calories_per_serving: float = Field(ge=0, le=5000)
    protein_grams: float = Field(default=0, ge=0, le=1000)
    carbs_grams: float = Field(default=0, ge=0, le=1000)
    fat_grams: float = Field(default=0, ge=0, le=1000)
    serving_size: str = Field(default="100g", min_length=1, max_length=50)
    serving_grams: float = Field(default=100, ge=1, le=2000)


class FoodUpdateRequest(BaseModel):
    """Partial custom food update."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    category: FoodCategory | None = None
    calories_per_serving: float | None = Field(default=None, ge=0, le=5000)
    protein_grams: float | None = Field(default=None, ge=0, le=1000)
    carbs_grams: float | None = Field(default=None, ge=0, le=1000)
    fat_grams: float | None = Field(default=None, ge=0, le=1000)
    serving_size: str | None = Field(default=None, min_length=1, max_length=50)
    serving_grams: float | None = Field(default=None, ge=1, le=2000)


class MacroCheckRequest(BaseModel):
    """Stated calories and macros to compare."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)


class MealLogCreateRequest(BaseModel):
    """A food to log."""

    food_id: UUID
    meal_type: MealType
    quantity: float = Field(ge=0, le=MAX_QUANTITY)
    unit: QuantityUnit = QuantityUnit.SERVING
    logged_date: date | None = None


class MealLogUpdateRequest(BaseModel):
    """Changes to a logged entry.

    ``unit`` qualifies ``quantity`` and is only accepted together with it.
    """

    meal_type: MealType | None = None
    quantity: float | None = Field(default=None, ge=0, le=MAX_QUANTITY)
    unit: QuantityUnit | None = None

    @model_validator(mode="after")
    def _unit_needs_quantity(self) -> "MealLogUpdateRequest":
        if self.unit is not None and self.quantity is None:
            raise ValueError("unit requires quantity")
        return self


class WeightLogRequest(BaseModel):
    """A weight measurement."""

    weight: float = Field(gt=0, le=1000)
    logged_date: date | None = None
    notes: str | None = Field(default=None, max_length=500)
