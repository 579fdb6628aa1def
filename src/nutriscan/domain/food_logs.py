"""Domain models for food logging."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrient amounts."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    sugar: float = 0.0

    def __add__(self, other: "NutritionTotals") -> "NutritionTotals":
        return NutritionTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            sugar=self.sugar + other.sugar,
        )


@dataclass(frozen=True)
class FoodLogItem:
    """A consumed item; nutrient values are the amounts actually eaten."""

    name: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    sugar: float = 0.0
    barcode: str = ""
    serving_size: str = ""
    quantity: float = 1.0

    def totals(self) -> NutritionTotals:
        return NutritionTotals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            sugar=self.sugar,
        )


@dataclass(frozen=True)
class FoodLog:
    """A group of items logged together."""

    id: UUID
    user_id: UUID
    logged_at: datetime
    items: list[FoodLogItem]
    notes: str | None = None

    def totals(self) -> NutritionTotals:
        total = NutritionTotals()
        for item in self.items:
            total = total + item.totals()
        return total
