"""Conversion of logged quantities into absolute nutrition values.

Food nutrition facts describe exactly ``serving_grams`` of the food. A
quantity in grams or milliliters scales by ``quantity / serving_grams``; a
quantity in servings scales by ``quantity``. Milliliters are treated as
grams (1 ml ~ 1 g); no density correction is applied.

Raw values keep full precision and are rounded once, at the end.
"""

from macro_tracker.domain.foods import FoodCategory, FoodNutritionFacts, QuantityUnit
from macro_tracker.domain.nutrition import (
    CalculationBreakdown,
    MacroAmounts,
    MacroCheck,
    NutritionResult,
    UnitOption,
)
from macro_tracker.rounding import round_half_up, round_int
from macro_tracker.services.targets import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
)

BASE_AMOUNT = 100
MACRO_TOLERANCE_PERCENT = 0.05
MACRO_TOLERANCE_MIN_KCAL = 5

_LIQUID_UNIT_ORDER = (QuantityUnit.SERVING, QuantityUnit.ML, QuantityUnit.G)
_SOLID_UNIT_ORDER = (QuantityUnit.SERVING, QuantityUnit.G, QuantityUnit.ML)


def quantity_multiplier(
    quantity: float, unit: QuantityUnit, serving_grams: float
) -> float:
    """Return how many servings a quantity represents."""
    if unit in (QuantityUnit.G, QuantityUnit.ML):
        return quantity / serving_grams
    return quantity


def compute_nutrition_for_quantity(
    facts: FoodNutritionFacts, quantity: float, unit: QuantityUnit
) -> NutritionResult:
    """Compute calories and macros for a quantity of a food."""
    multiplier = quantity_multiplier(quantity, unit, facts.serving_grams)
    return NutritionResult(
        calories=round_int(facts.calories_per_serving * multiplier),
        protein_grams=round_half_up(facts.protein_grams * multiplier, 1),
        carbs_grams=round_half_up(facts.carbs_grams * multiplier, 1),
        fat_grams=round_half_up(facts.fat_grams * multiplier, 1),
        display_quantity=format_quantity(facts, quantity, unit),
    )


def get_calculation_breakdown(
    facts: FoodNutritionFacts, quantity: float, unit: QuantityUnit
) -> CalculationBreakdown:
    """Return the per-100 values and multiplier behind a conversion."""
    per_base = _per_base_amounts(facts)
    multiplier = quantity_multiplier(quantity, unit, facts.serving_grams)
    return CalculationBreakdown(
        base_amount=BASE_AMOUNT,
        base_unit=facts.category.base_unit,
        per_base_nutrition=MacroAmounts(
            calories=round_half_up(per_base.calories, 1),
            protein_grams=round_half_up(per_base.protein_grams, 1),
            carbs_grams=round_half_up(per_base.carbs_grams, 1),
            fat_grams=round_half_up(per_base.fat_grams, 1),
        ),
        multiplier=round_half_up(multiplier, 2),
        final_nutrition=compute_nutrition_for_quantity(facts, quantity, unit),
    )


def format_quantity(
    facts: FoodNutritionFacts, quantity: float, unit: QuantityUnit
) -> str:
    """Human-readable quantity, e.g. ``150g`` or ``2 servings (300g)``."""
    amount = _format_number(quantity)
    if unit == QuantityUnit.SERVING:
        noun = "serving" if quantity == 1 else "servings"
        equivalent = round_int(quantity * facts.serving_grams)
        return f"{amount} {noun} ({equivalent}{facts.category.base_unit})"
    return f"{amount}{unit}"


def default_unit(category: FoodCategory) -> QuantityUnit:
    """Unit preselected when logging a food of this category."""
    if category.is_liquid:
        return QuantityUnit.ML
    return QuantityUnit.SERVING


def available_units(category: FoodCategory) -> list[UnitOption]:
    """Units offered for a food, in preferred order."""
    order = _LIQUID_UNIT_ORDER if category.is_liquid else _SOLID_UNIT_ORDER
    return [UnitOption(value=unit, label=unit.label) for unit in order]


def default_quantity(facts: FoodNutritionFacts) -> float:
    """Quantity preselected alongside ``default_unit``."""
    if default_unit(facts.category) == QuantityUnit.SERVING:
        return 1
    return facts.serving_grams


def convert_quantity(
    quantity: float,
    from_unit: QuantityUnit,
    to_unit: QuantityUnit,
    serving_grams: float,
) -> float:
    """Translate an entered quantity when the user switches unit."""
    if from_unit == QuantityUnit.SERVING and to_unit != QuantityUnit.SERVING:
        return round_int(servings_to_grams(quantity, serving_grams))
    if from_unit != QuantityUnit.SERVING and to_unit == QuantityUnit.SERVING:
        return round_half_up(grams_to_servings(quantity, serving_grams), 1)
    return quantity


def quantity_in_servings(
    quantity: float, unit: QuantityUnit, serving_grams: float
) -> float:
    """Express a quantity as a number of servings."""
    return quantity_multiplier(quantity, unit, serving_grams)


def servings_to_grams(servings: float, serving_grams: float) -> float:
    """Convert servings to grams (or ml)."""
    return servings * serving_grams


def grams_to_servings(grams: float, serving_grams: float) -> float:
    """Convert grams (or ml) to servings."""
    return grams / serving_grams


def validate_macro_calorie_match(
    calories: float, protein: float, carbs: float, fat: float
) -> MacroCheck:
    """Check that stated calories roughly agree with 4/4/9 macro calories.

    The tolerance is 5% of the stated calories with a 5 kcal floor. The
    result is advisory; callers decide whether to warn or block.
    """
    calculated = (
        protein * PROTEIN_KCAL_PER_G
        + carbs * CARBS_KCAL_PER_G
        + fat * FAT_KCAL_PER_G
    )
    difference = abs(calories - calculated)
    tolerance = max(calories * MACRO_TOLERANCE_PERCENT, MACRO_TOLERANCE_MIN_KCAL)
    return MacroCheck(
        is_valid=difference <= tolerance,
        calculated_calories=round_int(calculated),
        difference=round_int(difference),
    )


def _per_base_amounts(facts: FoodNutritionFacts) -> MacroAmounts:
    scale = BASE_AMOUNT / facts.serving_grams
    return MacroAmounts(
        calories=facts.calories_per_serving * scale,
        protein_grams=facts.protein_grams * scale,
        carbs_grams=facts.carbs_grams * scale,
        fat_grams=facts.fat_grams * scale,
    )


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
