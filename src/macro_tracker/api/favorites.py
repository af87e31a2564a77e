"""Favorite food endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from macro_tracker.api.auth import current_user_id

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/favorites", tags=["favorites"])


def _require_food(container: AppContainer, user_id: UUID, food_id: UUID) -> None:
    if container.food_service.get_food(user_id, food_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)


@router.get("")
async def list_favorites(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the caller's favorites."""
    container: AppContainer = request.app.state.container
    favorites = container.favorite_service.list_favorites(user_id)
    return {"favorites": [asdict(favorite) for favorite in favorites]}


@router.post("/{food_id}", status_code=status.HTTP_201_CREATED)
async def add_favorite(
    food_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Mark a food as favorite."""
    container: AppContainer = request.app.state.container
    _require_food(container, user_id, food_id)
    favorite = container.favorite_service.add_favorite(user_id, food_id)
    return {"favorite": asdict(favorite)}


@router.delete("/{food_id}")
async def remove_favorite(
    food_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Remove a food from favorites."""
    container: AppContainer = request.app.state.container
    container.favorite_service.remove_favorite(user_id, food_id)
    return {"deleted": True}


@router.post("/{food_id}/toggle")
async def toggle_favorite(
    food_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Flip a food's favorite state."""
    container: AppContainer = request.app.state.container
    _require_food(container, user_id, food_id)
    is_favorite = container.favorite_service.toggle_favorite(user_id, food_id)
    return {"food_id": food_id, "is_favorite": is_favorite}
