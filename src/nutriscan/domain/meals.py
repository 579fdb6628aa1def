"""Domain models for reusable meals."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from nutriscan.domain.food_logs import NutritionTotals

MIN_SERVINGS = 0.1


@dataclass(frozen=True)
class MealItem:
    """One component of a meal, with per-serving nutrients."""

    name: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    sugar: float = 0.0
    servings: float = 1.0

    def totals(self) -> NutritionTotals:
        """Nutrients for the configured number of servings."""
        return NutritionTotals(
            calories=self.calories * self.servings,
            protein=self.protein * self.servings,
            carbs=self.carbs * self.servings,
            fat=self.fat * self.servings,
            sugar=self.sugar * self.servings,
        )


@dataclass(frozen=True)
class Meal:
    """A named, reusable list of items owned by a user."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    items: list[MealItem]
    created_at: datetime
    updated_at: datetime

    def totals(self) -> NutritionTotals:
        total = NutritionTotals()
        for item in self.items:
            total = total + item.totals()
        return total
