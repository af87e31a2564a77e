"""Tests for quantity to nutrition conversion."""

import pytest

from macro_tracker.domain.foods import FoodCategory, FoodNutritionFacts, QuantityUnit
from macro_tracker.services.quantities import (
    available_units,
    compute_nutrition_for_quantity,
    convert_quantity,
    default_quantity,
    default_unit,
    format_quantity,
    get_calculation_breakdown,
    quantity_in_servings,
    validate_macro_calorie_match,
)

RICE = FoodNutritionFacts(
    calories_per_serving=300,
    protein_grams=20,
    carbs_grams=30,
    fat_grams=10,
    serving_grams=150,
    category=FoodCategory.GRAINS,
)

MILK = FoodNutritionFacts(
    calories_per_serving=150,
    protein_grams=8,
    carbs_grams=12,
    fat_grams=8,
    serving_grams=250,
    category=FoodCategory.BEVERAGES,
)


def test_one_serving_equals_serving_grams() -> None:
    by_serving = compute_nutrition_for_quantity(RICE, 1, QuantityUnit.SERVING)
    by_grams = compute_nutrition_for_quantity(RICE, 150, QuantityUnit.G)

    assert by_serving.calories == 300
    assert by_grams.calories == 300
    assert by_serving.protein_grams == by_grams.protein_grams == 20


def test_half_serving_in_grams() -> None:
    result = compute_nutrition_for_quantity(RICE, 75, QuantityUnit.G)

    assert result.calories == 150
    assert result.protein_grams == 10
    assert result.carbs_grams == 15
    assert result.fat_grams == 5
    assert result.display_quantity == "75g"


def test_milliliters_match_grams() -> None:
    grams = compute_nutrition_for_quantity(MILK, 330, QuantityUnit.G)
    milliliters = compute_nutrition_for_quantity(MILK, 330, QuantityUnit.ML)

    assert grams.calories == milliliters.calories == 198
    assert grams.protein_grams == milliliters.protein_grams
    assert grams.carbs_grams == milliliters.carbs_grams
    assert grams.fat_grams == milliliters.fat_grams


def test_zero_quantity_yields_zero_nutrition() -> None:
    result = compute_nutrition_for_quantity(RICE, 0, QuantityUnit.G)

    assert result.calories == 0
    assert result.protein_grams == 0
    assert result.display_quantity == "0g"


def test_macros_round_to_one_decimal() -> None:
    result = compute_nutrition_for_quantity(RICE, 100, QuantityUnit.G)

    assert result.calories == 200
    assert result.protein_grams == 13.3
    assert result.carbs_grams == 20
    assert result.fat_grams == 6.7


@pytest.mark.parametrize(
    ("facts", "quantity", "unit", "expected"),
    [
        (RICE, 150, QuantityUnit.G, "150g"),
        (MILK, 330, QuantityUnit.ML, "330ml"),
        (RICE, 1, QuantityUnit.SERVING, "1 serving (150g)"),
        (RICE, 2.5, QuantityUnit.SERVING, "2.5 servings (375g)"),
        (MILK, 2, QuantityUnit.SERVING, "2 servings (500ml)"),
        (RICE, 12.5, QuantityUnit.G, "12.5g"),
    ],
)
def test_format_quantity(
    facts: FoodNutritionFacts, quantity: float, unit: QuantityUnit, expected: str
) -> None:
    assert format_quantity(facts, quantity, unit) == expected


def test_calculation_breakdown_for_solid_food() -> None:
    breakdown = get_calculation_breakdown(RICE, 75, QuantityUnit.G)

    assert breakdown.base_amount == 100
    assert breakdown.base_unit == QuantityUnit.G
    assert breakdown.per_base_nutrition.calories == 200
    assert breakdown.per_base_nutrition.protein_grams == 13.3
    assert breakdown.per_base_nutrition.carbs_grams == 20
    assert breakdown.per_base_nutrition.fat_grams == 6.7
    assert breakdown.multiplier == 0.5
    assert breakdown.final_nutrition == compute_nutrition_for_quantity(
        RICE, 75, QuantityUnit.G
    )


def test_calculation_breakdown_for_liquid_uses_ml() -> None:
    breakdown = get_calculation_breakdown(MILK, 2, QuantityUnit.SERVING)

    assert breakdown.base_unit == QuantityUnit.ML
    assert breakdown.per_base_nutrition.calories == 60
    assert breakdown.multiplier == 2
    assert breakdown.final_nutrition.calories == 300


def test_default_unit_and_quantity() -> None:
    assert default_unit(FoodCategory.BEVERAGES) == QuantityUnit.ML
    assert default_unit(FoodCategory.PROTEINS) == QuantityUnit.SERVING
    assert default_quantity(MILK) == 250
    assert default_quantity(RICE) == 1


def test_available_units_order() -> None:
    liquid = available_units(FoodCategory.BEVERAGES)
    solid = available_units(FoodCategory.FRUITS)

    assert [option.value for option in liquid] == [
        QuantityUnit.SERVING,
        QuantityUnit.ML,
        QuantityUnit.G,
    ]
    assert [option.value for option in solid] == [
        QuantityUnit.SERVING,
        QuantityUnit.G,
        QuantityUnit.ML,
    ]
    assert solid[1].label == "Grams (g)"


def test_only_beverages_are_liquid() -> None:
    liquids = [category for category in FoodCategory if category.is_liquid]

    assert liquids == [FoodCategory.BEVERAGES]


def test_convert_quantity_between_units() -> None:
    assert convert_quantity(1.5, QuantityUnit.SERVING, QuantityUnit.G, 150) == 225
    assert convert_quantity(200, QuantityUnit.G, QuantityUnit.SERVING, 150) == 1.3
    assert convert_quantity(200, QuantityUnit.G, QuantityUnit.ML, 150) == 200
    assert convert_quantity(2, QuantityUnit.SERVING, QuantityUnit.SERVING, 150) == 2


def test_quantity_in_servings() -> None:
    assert quantity_in_servings(300, QuantityUnit.G, 150) == 2
    assert quantity_in_servings(1.5, QuantityUnit.SERVING, 150) == 1.5


def test_macro_check_accepts_consistent_food() -> None:
    check = validate_macro_calorie_match(200, 10, 25, 6.7)

    assert check.is_valid
    assert check.calculated_calories == 200
    assert check.difference == 0


def test_macro_check_rejects_calories_without_macros() -> None:
    check = validate_macro_calorie_match(100, 0, 0, 0)

    assert not check.is_valid
    assert check.calculated_calories == 0
    assert check.difference == 100


def test_macro_check_uses_minimum_tolerance() -> None:
    assert validate_macro_calorie_match(40, 0, 9, 0).is_valid
    assert not validate_macro_calorie_match(40, 0, 8.5, 0).is_valid


def test_macro_check_tolerance_scales_with_calories() -> None:
    assert validate_macro_calorie_match(1000, 0, 238, 0).is_valid
    assert not validate_macro_calorie_match(1000, 0, 237, 0).is_valid


def test_format_quantity_keeps_every_digit() -> None:
    assert format_quantity(RICE, 1234567.5, QuantityUnit.G) == "1234567.5g"
    assert (
        format_quantity(RICE, 0.1234567, QuantityUnit.SERVING)
        == "0.1234567 servings (19g)"
    )


def test_huge_quantity_does_not_overflow_rounding() -> None:
    result = compute_nutrition_for_quantity(RICE, 1e27, QuantityUnit.SERVING)

    assert result.calories == pytest.approx(3e29)
