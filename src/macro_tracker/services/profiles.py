"""Profile service: onboarding, edits and target recalculation.

Stored targets are a cached projection of the body metrics. They are
recomputed whenever a metric input changes and never edited directly.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.profiles import (
    BodyProfile,
    DailyTargets,
    OnboardingData,
    ProfileRecord,
    TargetBreakdown,
)
from macro_tracker.services.errors import (
    ProfileIncompleteError,
    ProfileNotFoundError,
)
from macro_tracker.services.targets import explain_daily_targets, to_metric

_logger = logging.getLogger(__name__)

METRIC_FIELDS = frozenset(
    {
        "current_weight",
        "height",
        "age",
        "gender",
        "activity_level",
        "goal_type",
        "unit_system",
    }
)

TARGET_FIELDS = frozenset(
    {
        "daily_calorie_target",
        "daily_protein_target",
        "daily_carbs_target",
        "daily_fat_target",
    }
)

NON_NULL_FIELDS = frozenset({"goal_type", "activity_level", "unit_system"})


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> ProfileRecord | None:
        """Return the user's profile, if present."""

    def update_profile(
        self, user_id: UUID, updates: dict[str, object]
    ) -> ProfileRecord:
        """Apply updates to the user's profile and return it."""


@dataclass
class ProfileService:
    """Application service for profiles and their derived targets."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> ProfileRecord | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def update_profile(
        self, user_id: UUID, updates: dict[str, object]
    ) -> ProfileRecord:
        """Update profile fields, refreshing targets when metrics change.

        Targets are cleared when the update leaves the profile incomplete.
        """
        current = self._require_profile(user_id)
        payload = {
            key: value
            for key, value in updates.items()
            if key not in TARGET_FIELDS
            and not (value is None and key in NON_NULL_FIELDS)
        }
        if METRIC_FIELDS & payload.keys():
            body = body_profile(_merge(current, payload))
            if body is None:
                payload.update(dict.fromkeys(TARGET_FIELDS))
            else:
                payload.update(_target_fields(self._explain(user_id, body).targets))
        return self.repository.update_profile(user_id, payload)

    def complete_onboarding(
        self, user_id: UUID, data: OnboardingData
    ) -> ProfileRecord:
        """Store onboarding answers with freshly computed targets."""
        self._require_profile(user_id)
        weight_kg, height_cm = to_metric(
            data.current_weight, data.height, data.unit_system
        )
        body = BodyProfile(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age_years=data.age,
            gender=data.gender,
            activity_level=data.activity_level,
            goal_type=data.goal_type,
        )
        targets = self._explain(user_id, body).targets
        payload: dict[str, object] = {
            "name": data.name,
            "age": data.age,
            "gender": data.gender,
            "current_weight": data.current_weight,
            "height": data.height,
            "target_weight": data.target_weight,
            "goal_type": data.goal_type,
            "activity_level": data.activity_level,
            "unit_system": data.unit_system,
            "onboarding_completed": True,
            **_target_fields(targets),
        }
        return self.repository.update_profile(user_id, payload)

    def recalculate_targets(self, user_id: UUID) -> ProfileRecord:
        """Recompute and store targets from the current profile."""
        profile = self._require_profile(user_id)
        body = body_profile(profile)
        if body is None:
            raise ProfileIncompleteError("Missing profile data")
        targets = self._explain(user_id, body).targets
        return self.repository.update_profile(user_id, _target_fields(targets))

    def explain_targets(self, user_id: UUID) -> TargetBreakdown | None:
        """Return the target calculation for the current profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            return None
        body = body_profile(profile)
        if body is None:
            return None
        return explain_daily_targets(body)

    def _require_profile(self, user_id: UUID) -> ProfileRecord:
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFoundError(str(user_id))
        return profile

    @staticmethod
    def _explain(user_id: UUID, body: BodyProfile) -> TargetBreakdown:
        breakdown = explain_daily_targets(body)
        _logger.info(
            "Targets recalculated: user_id=%s calories=%s",
            user_id,
            breakdown.targets.calories,
        )
        return breakdown


def body_profile(profile: ProfileRecord) -> BodyProfile | None:
    """Build metric body inputs from a profile, or None if incomplete."""
    if (
        not profile.current_weight
        or not profile.height
        or not profile.age
        or profile.gender is None
    ):
        return None
    weight_kg, height_cm = to_metric(
        profile.current_weight, profile.height, profile.unit_system
    )
    return BodyProfile(
        weight_kg=weight_kg,
        height_cm=height_cm,
        age_years=profile.age,
        gender=profile.gender,
        activity_level=profile.activity_level,
        goal_type=profile.goal_type,
    )


def _merge(profile: ProfileRecord, updates: dict[str, object]) -> ProfileRecord:
    known = {field.name for field in fields(ProfileRecord)}
    return replace(profile, **{k: v for k, v in updates.items() if k in known})


def _target_fields(targets: DailyTargets) -> dict[str, object]:
    return {
        "daily_calorie_target": targets.calories,
        "daily_protein_target": targets.protein_grams,
        "daily_carbs_target": targets.carbs_grams,
        "daily_fat_target": targets.fat_grams,
    }
