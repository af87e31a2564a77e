"""Daily calorie and macro target calculations.

- BMR: Mifflin-St Jeor, ``10*kg + 6.25*cm - 5*age + s`` where ``s`` is +5 for
  male and -161 otherwise. "other" shares the female offset because the
  clinical formula only defines two; the choice is pending product review.
- TDEE: BMR times a fixed activity multiplier.
- Calorie target: TDEE scaled by goal (-20% lose, +10% gain).
- Macros: protein from body weight, fat as 25% of the calorie target, carbs
  take the remaining calories and are clamped at zero.

Every named step rounds half away from zero. The calorie target is not
re-derived from the rounded macros, so the two may differ by a few calories.

All functions take metric inputs; use ``to_metric`` for imperial profiles.
"""

from macro_tracker.domain.profiles import (
    ActivityLevel,
    BodyProfile,
    DailyTargets,
    Gender,
    GoalType,
    TargetBreakdown,
    UnitSystem,
)
from macro_tracker.rounding import round_half_up, round_int

MALE_OFFSET = 5
FEMALE_OFFSET = -161

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

GOAL_MULTIPLIERS: dict[GoalType, float] = {
    GoalType.LOSE: 0.80,
    GoalType.MAINTAIN: 1.0,
    GoalType.GAIN: 1.10,
}

PROTEIN_PER_KG: dict[GoalType, float] = {
    GoalType.LOSE: 2.0,
    GoalType.MAINTAIN: 1.6,
    GoalType.GAIN: 1.8,
}

FAT_PERCENT = 0.25

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

LBS_PER_KG = 2.205
CM_PER_INCH = 2.54
CM_PER_FOOT = 30.48


def gender_offset(gender: Gender) -> int:
    """Return the Mifflin-St Jeor constant for a gender."""
    return MALE_OFFSET if gender == Gender.MALE else FEMALE_OFFSET


def calculate_bmr(
    weight_kg: float, height_cm: float, age_years: int, gender: Gender
) -> float:
    """Basal metabolic rate in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    return base + gender_offset(gender)


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Total daily energy expenditure in kcal/day."""
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def calculate_calorie_target(tdee: float, goal_type: GoalType) -> int:
    """Daily calorie target adjusted for the goal."""
    return round_int(tdee * GOAL_MULTIPLIERS[goal_type])


def calculate_macro_targets(
    calorie_target: int, goal_type: GoalType, weight_kg: float
) -> tuple[int, int, int]:
    """Return ``(protein, carbs, fat)`` grams for a calorie target."""
    protein = round_int(weight_kg * PROTEIN_PER_KG[goal_type])
    fat = round_int(calorie_target * FAT_PERCENT / FAT_KCAL_PER_G)
    carb_calories = (
        calorie_target - protein * PROTEIN_KCAL_PER_G - fat * FAT_KCAL_PER_G
    )
    carbs = round_int(max(0, carb_calories) / CARBS_KCAL_PER_G)
    return protein, carbs, fat


def compute_daily_targets(profile: BodyProfile) -> DailyTargets:
    """Compute daily calorie and macro targets for a body profile."""
    return explain_daily_targets(profile).targets


def explain_daily_targets(profile: BodyProfile) -> TargetBreakdown:
    """Compute daily targets and keep every intermediate value."""
    bmr = calculate_bmr(
        profile.weight_kg, profile.height_cm, profile.age_years, profile.gender
    )
    tdee = calculate_tdee(bmr, profile.activity_level)
    calorie_target = calculate_calorie_target(tdee, profile.goal_type)
    protein, carbs, fat = calculate_macro_targets(
        calorie_target, profile.goal_type, profile.weight_kg
    )
    return TargetBreakdown(
        profile=profile,
        gender_offset=gender_offset(profile.gender),
        bmr=bmr,
        activity_multiplier=ACTIVITY_MULTIPLIERS[profile.activity_level],
        tdee=tdee,
        goal_multiplier=GOAL_MULTIPLIERS[profile.goal_type],
        protein_per_kg=PROTEIN_PER_KG[profile.goal_type],
        fat_percent=FAT_PERCENT,
        targets=DailyTargets(
            calories=calorie_target,
            protein_grams=protein,
            carbs_grams=carbs,
            fat_grams=fat,
        ),
    )


def to_metric(
    weight: float, height: float, unit_system: UnitSystem
) -> tuple[float, float]:
    """Convert stored weight and height to ``(kg, cm)``.

    Imperial profiles store pounds and inches.
    """
    if unit_system == UnitSystem.IMPERIAL:
        return weight / LBS_PER_KG, height * CM_PER_INCH
    return weight, height


def convert_weight(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a weight between ``kg`` and ``lbs``, rounded to 0.1."""
    if from_unit == to_unit:
        return value
    if from_unit == "kg" and to_unit == "lbs":
        return round_half_up(value * LBS_PER_KG, 1)
    return round_half_up(value / LBS_PER_KG, 1)


def convert_height(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a height between ``cm`` and ``ft``, rounded to 0.1."""
    if from_unit == to_unit:
        return value
    if from_unit == "cm" and to_unit == "ft":
        return round_half_up(value / CM_PER_FOOT, 1)
    return round_half_up(value * CM_PER_FOOT, 1)
