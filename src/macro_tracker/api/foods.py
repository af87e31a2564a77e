"""Food catalog endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from macro_tracker.api.auth import current_user_id
from macro_tracker.api.responses import custom_food_payload, preview_payload
from macro_tracker.api.schemas import (  # noqa: TC001
    MAX_QUANTITY,
    FoodCreateRequest,
    FoodUpdateRequest,
    MacroCheckRequest,
)
from macro_tracker.domain.foods import FoodCategory, QuantityUnit
from macro_tracker.services.quantities import (
    available_units,
    default_quantity,
    default_unit,
    validate_macro_calorie_match,
)

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("")
async def search_foods(
    request: Request,
    q: str | None = None,
    category: FoodCategory | None = None,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Search system foods and the caller's custom foods."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.search(user_id, q, category)
    return {"foods": [asdict(food) for food in foods]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(
    payload: FoodCreateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Create a custom food; the macro check is advisory."""
    container: AppContainer = request.app.state.container
    result = container.food_service.create_custom_food(user_id, payload.model_dump())
    return custom_food_payload(result)


@router.post("/validate-macros", dependencies=[Depends(current_user_id)])
async def validate_macros(payload: MacroCheckRequest) -> dict[str, object]:
    """Compare stated calories against 4/4/9 macro calories."""
    check = validate_macro_calorie_match(
        payload.calories, payload.protein, payload.carbs, payload.fat
    )
    return asdict(check)


@router.patch("/{food_id}")
async def update_food(
    food_id: UUID,
    payload: FoodUpdateRequest,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Update one of the caller's custom foods."""
    container: AppContainer = request.app.state.container
    result = container.food_service.update_food(
        user_id, food_id, payload.model_dump(exclude_unset=True)
    )
    if result is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return custom_food_payload(result)


@router.delete("/{food_id}")
async def delete_food(
    food_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Delete one of the caller's custom foods."""
    container: AppContainer = request.app.state.container
    if not container.food_service.delete_food(user_id, food_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"deleted": True}


@router.get("/{food_id}/nutrition")
async def food_nutrition(
    food_id: UUID,
    request: Request,
    quantity: float = Query(ge=0, le=MAX_QUANTITY),
    unit: QuantityUnit = QuantityUnit.SERVING,
    user_id: UUID = Depends(current_user_id),
) -> dict[str, object]:
    """Preview nutrition for a quantity of a food."""
    container: AppContainer = request.app.state.container
    preview = container.food_service.preview(user_id, food_id, quantity, unit)
    if preview is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return preview_payload(preview)


@router.get("/{food_id}/units")
async def food_units(
    food_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, object]:
    """Return the default and available quantity units for a food."""
    container: AppContainer = request.app.state.container
    food = container.food_service.get_food(user_id, food_id)
    if food is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        "default_unit": default_unit(food.category),
        "default_quantity": default_quantity(food.facts),
        "units": [asdict(option) for option in available_units(food.category)],
    }
