"""Meal endpoints."""

from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, status

from nutriscan.api.deps import get_container, require_user
from nutriscan.api.food_logs import serialize_log
from nutriscan.api.models import MealCreate, MealLogRequest, MealUpdate
from nutriscan.containers import AppContainer
from nutriscan.domain.meals import Meal

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.get("")
async def list_meals(
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """List the caller's meals."""
    meals = container.meal_service.list_meals(user_id)
    return {"meals": [_serialize_meal(meal) for meal in meals]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealCreate,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a meal."""
    meal = container.meal_service.create_meal(
        user_id,
        body.name,
        [item.to_domain() for item in body.items],
        description=body.description,
    )
    return {"message": "Meal created successfully", "meal": _serialize_meal(meal)}


@router.put("/{meal_id}")
async def update_meal(
    meal_id: UUID,
    body: MealUpdate,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update a meal."""
    meal = container.meal_service.update_meal(
        user_id,
        meal_id,
        name=body.name,
        description=body.description,
        items=[item.to_domain() for item in body.items] if body.items else None,
    )
    return {"message": "Meal updated successfully", "meal": _serialize_meal(meal)}


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a meal."""
    container.meal_service.delete_meal(user_id, meal_id)
    return {"message": "Meal deleted successfully"}


@router.post("/{meal_id}/log", status_code=status.HTTP_201_CREATED)
async def log_meal(
    meal_id: UUID,
    body: MealLogRequest | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Add every item of a meal to the caller's food log."""
    log = container.meal_service.log_meal(
        user_id, meal_id, logged_at=body.logged_at if body else None
    )
    return serialize_log(log)


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "description": meal.description,
        "items": [asdict(item) for item in meal.items],
        "totals": asdict(meal.totals()),
        "created_at": meal.created_at.isoformat(),
        "updated_at": meal.updated_at.isoformat(),
    }
