"""Nutrition calculation results."""

from dataclasses import dataclass

from macro_tracker.domain.foods import QuantityUnit


@dataclass(frozen=True)
class NutritionResult:
    """Absolute nutrition for one logged quantity of a food."""

    calories: int
    protein_grams: float
    carbs_grams: float
    fat_grams: float
    display_quantity: str


@dataclass(frozen=True)
class MacroAmounts:
    """Calories and macros for a reference amount."""

    calories: float
    protein_grams: float
    carbs_grams: float
    fat_grams: float


@dataclass(frozen=True)
class CalculationBreakdown:
    """Display view of a quantity conversion.

    ``per_base_nutrition`` and ``multiplier`` are rounded for display and are
    never used to compute ``final_nutrition``.
    """

    base_amount: int
    base_unit: QuantityUnit
    per_base_nutrition: MacroAmounts
    multiplier: float
    final_nutrition: NutritionResult


@dataclass(frozen=True)
class MacroCheck:
    """Outcome of comparing stated calories with macro-derived calories."""

    is_valid: bool
    calculated_calories: int
    difference: int


@dataclass(frozen=True)
class UnitOption:
    """A selectable quantity unit."""

    value: QuantityUnit
    label: str
