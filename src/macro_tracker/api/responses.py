"""Helpers that turn domain results into JSON-ready dicts."""

from dataclasses import asdict

from macro_tracker.domain.profiles import DailyTargets, TargetBreakdown
from macro_tracker.services.foods import CustomFoodResult, NutritionPreview


def targets_payload(targets: DailyTargets) -> dict[str, object]:
    """Serialize targets with their macro-derived calories."""
    return {**asdict(targets), "macro_calories": targets.macro_calories}


def breakdown_payload(breakdown: TargetBreakdown) -> dict[str, object]:
    """Serialize a target calculation breakdown."""
    payload = asdict(breakdown)
    payload["targets"] = targets_payload(breakdown.targets)
    payload["macro_calories"] = breakdown.macro_calories
    return payload


def custom_food_payload(result: CustomFoodResult) -> dict[str, object]:
    """Serialize a custom food together with its advisory macro check."""
    return {"food": asdict(result.food), "macro_check": asdict(result.check)}


def preview_payload(preview: NutritionPreview) -> dict[str, object]:
    """Serialize a nutrition preview."""
    return {
        "food": asdict(preview.food),
        "nutrition": asdict(preview.nutrition),
        "breakdown": asdict(preview.breakdown),
    }
