"""Meal log endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from macro_tracker.api.auth import current_user_id
from macro_tracker.api.schemas import (  # noqa: TC001
    MealLogCreateRequest,
    MealLogUpdateRequest,
)

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("")
async def get_day(
    request: Request,
    logged_date: date | None = Query(default=None, alias="date"),
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Return a day's entries, totals and per-meal grouping."""
    container: AppContainer = request.app.state.container
    day = container.meal_log_service.get_day(user_id, logged_date or date.today())
    return asdict(day)


@router.post("", status_code=status.HTTP_201_CREATED)
async def log_food(
    payload: MealLogCreateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Log a quantity of a food."""
    container: AppContainer = request.app.state.container
    entry = container.meal_log_service.log_food(
        user_id=user_id,
        food_id=payload.food_id,
        meal_type=payload.meal_type,
        quantity=payload.quantity,
        unit=payload.unit,
        logged_date=payload.logged_date or date.today(),
    )
    return {"entry": asdict(entry)}


@router.patch("/{log_id}")
async def update_entry(
    log_id: UUID,
    payload: MealLogUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Change an entry's meal slot or quantity."""
    container: AppContainer = request.app.state.container
    entry = container.meal_log_service.update_entry(
        user_id,
        log_id,
        quantity=payload.quantity,
        unit=payload.unit,
        meal_type=payload.meal_type,
    )
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"entry": asdict(entry)}


@router.delete("/{log_id}")
async def delete_entry(
    log_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Delete an entry."""
    container: AppContainer = request.app.state.container
    if not container.meal_log_service.delete_entry(user_id, log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"deleted": True}
