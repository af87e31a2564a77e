"""Profile and target endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from macro_tracker.api.auth import current_user_id
from macro_tracker.api.responses import breakdown_payload
from macro_tracker.api.schemas import (  # noqa: TC001
    BodyProfileRequest,
    OnboardingRequest,
    ProfileUpdateRequest,
)
from macro_tracker.services.targets import explain_daily_targets

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(tags=["profile"])


@router.get("/profile")
async def get_profile(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"profile": asdict(profile)}


@router.patch("/profile")
async def update_profile(
    payload: ProfileUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Apply a partial profile update."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.update_profile(
        user_id, payload.model_dump(exclude_unset=True)
    )
    return {"profile": asdict(profile)}


@router.post("/profile/onboarding")
async def complete_onboarding(
    payload: OnboardingRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Store onboarding answers and initial targets."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.complete_onboarding(
        user_id, payload.to_domain()
    )
    return {"profile": asdict(profile)}


@router.post("/profile/recalculate")
async def recalculate_targets(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Recompute targets from the stored profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.recalculate_targets(user_id)
    return {"profile": asdict(profile)}


@router.get("/profile/targets/breakdown")
async def target_breakdown(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Explain how the caller's targets are derived."""
    container: AppContainer = request.app.state.container
    breakdown = container.profile_service.explain_targets(user_id)
    if breakdown is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return breakdown_payload(breakdown)


@router.post("/targets/calculate", dependencies=[Depends(current_user_id)])
async def calculate_targets(payload: BodyProfileRequest) -> dict[str, object]:
    """Calculate targets for arbitrary metric inputs without storing them."""
    return breakdown_payload(explain_daily_targets(payload.to_domain()))
