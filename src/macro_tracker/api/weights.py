"""Weight log endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from macro_tracker.api.auth import current_user_id
from macro_tracker.api.schemas import WeightLogRequest  # noqa: TC001
from macro_tracker.services.weights import progress

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/weights", tags=["weights"])


@router.get("")
async def list_weights(
    request: Request,
    days: int | None = Query(default=None, gt=0, le=3650),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return recent weight logs and progress toward the target weight."""
    container: AppContainer = request.app.state.container
    window = days or container.settings.weight_history_days
    logs = container.weight_log_service.list_recent(user_id, days=window)
    profile = container.profile_service.get_profile(user_id)
    target_weight = profile.target_weight if profile else None
    return {
        "logs": [asdict(log) for log in logs],
        "progress": asdict(progress(logs, target_weight)),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_weight(
    payload: WeightLogRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Record the weight for a date."""
    container: AppContainer = request.app.state.container
    log = container.weight_log_service.log_weight(
        user_id,
        weight=payload.weight,
        logged_date=payload.logged_date or date.today(),
        notes=payload.notes,
    )
    return {"log": asdict(log)}


@router.delete("/{log_id}")
async def delete_weight(
    log_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Delete a weight log."""
    container: AppContainer = request.app.state.container
    if not container.weight_log_service.delete(user_id, log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"deleted": True}
