"""Domain models for user body profiles and daily targets."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class Gender(StrEnum):
    """Gender values accepted by the profile."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"


class GoalType(StrEnum):
    """Body weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class UnitSystem(StrEnum):
    """Measurement system the user enters body metrics in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


@dataclass(frozen=True)
class BodyProfile:
    """Metric body measurements used to derive daily targets."""

    weight_kg: float
    height_cm: float
    age_years: int
    gender: Gender
    activity_level: ActivityLevel
    goal_type: GoalType


@dataclass(frozen=True)
class DailyTargets:
    """Daily energy and macronutrient targets."""

    calories: int
    protein_grams: int
    carbs_grams: int
    fat_grams: int

    @property
    def macro_calories(self) -> int:
        """Calories reconstructed from the macro grams."""
        return self.protein_grams * 4 + self.carbs_grams * 4 + self.fat_grams * 9


@dataclass(frozen=True)
class TargetBreakdown:
    """Intermediate values of a daily target calculation."""

    profile: BodyProfile
    gender_offset: int
    bmr: float
    activity_multiplier: float
    tdee: float
    goal_multiplier: float
    protein_per_kg: float
    fat_percent: float
    targets: DailyTargets

    @property
    def macro_calories(self) -> int:
        """Calories reconstructed from the target macros."""
        return self.targets.macro_calories


@dataclass(frozen=True)
class ProfileRecord:
    """Profile row stored for a user.

    Weight and height are kept in the user's unit system: kilograms and
    centimeters for metric, pounds and inches for imperial.
    """

    id: UUID
    user_id: UUID
    name: str | None
    age: int | None
    gender: Gender | None
    current_weight: float | None
    height: float | None
    target_weight: float | None
    goal_type: GoalType
    activity_level: ActivityLevel
    daily_calorie_target: int | None
    daily_protein_target: int | None
    daily_carbs_target: int | None
    daily_fat_target: int | None
    unit_system: UnitSystem
    onboarding_completed: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def targets(self) -> DailyTargets | None:
        """Stored targets, if they have been calculated."""
        if self.daily_calorie_target is None:
            return None
        return DailyTargets(
            calories=self.daily_calorie_target,
            protein_grams=self.daily_protein_target or 0,
            carbs_grams=self.daily_carbs_target or 0,
            fat_grams=self.daily_fat_target or 0,
        )


@dataclass(frozen=True)
class OnboardingData:
    """Answers collected by the onboarding flow."""

    name: str
    age: int
    gender: Gender
    current_weight: float
    height: float
    target_weight: float
    goal_type: GoalType
    activity_level: ActivityLevel
    unit_system: UnitSystem = UnitSystem.METRIC
