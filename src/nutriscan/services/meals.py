"""Reusable meal service."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from nutriscan.domain.errors import InvalidInputError, NotFoundError
from nutriscan.domain.food_logs import FoodLog, FoodLogItem
from nutriscan.domain.meals import MIN_SERVINGS, Meal, MealItem
from nutriscan.services.food_logs import FoodLogService

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return a user's meals, most recently updated first."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def create_meal(
        self, user_id: UUID, name: str, description: str, items: list[MealItem]
    ) -> Meal:
        """Create a meal and return it."""

    def update_meal(self, meal: Meal) -> Meal:
        """Persist the name, description, items and updated_at of a meal."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal."""


@dataclass
class MealService:
    """Application service for meals."""

    repository: MealRepository
    food_log_service: FoodLogService

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return the user's meals."""
        return self.repository.list_meals(user_id)

    def create_meal(
        self,
        user_id: UUID,
        name: str,
        items: list[MealItem],
        description: str | None = None,
    ) -> Meal:
        """Create a meal after validating its name and items."""
        cleaned_name = name.strip()
        if not cleaned_name:
            raise InvalidInputError("Meal name is required")
        if not items:
            raise InvalidInputError("At least one item is required")
        meal = self.repository.create_meal(
            user_id,
            cleaned_name,
            (description or "").strip(),
            [_clamp_servings(item) for item in items],
        )
        _logger.info("Meal created: user=%s meal=%s", user_id, meal.id)
        return meal

    def update_meal(
        self,
        user_id: UUID,
        meal_id: UUID,
        name: str | None = None,
        description: str | None = None,
        items: list[MealItem] | None = None,
    ) -> Meal:
        """Update the provided fields; blank names and empty item lists are ignored."""
        meal = self._get_owned(user_id, meal_id)
        updated = meal
        if name and name.strip():
            updated = replace(updated, name=name.strip())
        if description is not None:
            updated = replace(updated, description=description.strip())
        if items:
            updated = replace(updated, items=[_clamp_servings(item) for item in items])
        updated = replace(updated, updated_at=datetime.now(tz=UTC))
        return self.repository.update_meal(updated)

    def delete_meal(self, user_id: UUID, meal_id: UUID) -> None:
        """Delete one of the user's meals."""
        self._get_owned(user_id, meal_id)
        self.repository.delete_meal(meal_id)
        _logger.info("Meal deleted: user=%s meal=%s", user_id, meal_id)

    def log_meal(
        self, user_id: UUID, meal_id: UUID, logged_at: datetime | None = None
    ) -> FoodLog:
        """Log every item of a meal, scaled by its servings."""
        meal = self._get_owned(user_id, meal_id)
        items = [_to_log_item(item) for item in meal.items]
        return self.food_log_service.create_log(
            user_id, items, logged_at=logged_at, notes=meal.name
        )

    def _get_owned(self, user_id: UUID, meal_id: UUID) -> Meal:
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            raise NotFoundError("Meal not found")
        return meal


def _clamp_servings(item: MealItem) -> MealItem:
    if item.servings >= MIN_SERVINGS:
        return item
    return replace(item, servings=MIN_SERVINGS)


def _to_log_item(item: MealItem) -> FoodLogItem:
    totals = item.totals()
    return FoodLogItem(
        name=item.name,
        calories=round(totals.calories),
        protein=round(totals.protein, 1),
        carbs=round(totals.carbs, 1),
        fat=round(totals.fat, 1),
        sugar=round(totals.sugar, 1),
        quantity=item.servings,
    )
