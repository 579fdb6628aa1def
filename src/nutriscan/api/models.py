"""Request models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, Field

from nutriscan.domain.food_logs import FoodLogItem
from nutriscan.domain.meals import MealItem


class FoodLogItemIn(BaseModel):
    """A consumed item as submitted by the client."""

    name: str = Field(min_length=1)
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    sugar: float = Field(default=0.0, ge=0)
    barcode: str = ""
    serving_size: str = ""
    quantity: float = Field(default=1.0, gt=0)

    def to_domain(self) -> FoodLogItem:
        return FoodLogItem(**self.model_dump())


class FoodLogCreate(BaseModel):
    """Body for creating a food log."""

    items: list[FoodLogItemIn]
    logged_at: datetime | None = None
    notes: str | None = None


class FoodLogItemUpdate(BaseModel):
    """Partial update of a logged item; only set fields are applied."""

    name: str | None = Field(default=None, min_length=1)
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    barcode: str | None = None
    serving_size: str | None = None
    quantity: float | None = Field(default=None, gt=0)


class MealItemIn(BaseModel):
    """A meal component with per-serving nutrients."""

    name: str = Field(min_length=1)
    calories: float = Field(default=0.0, ge=0)
    protein: float = Field(default=0.0, ge=0)
    carbs: float = Field(default=0.0, ge=0)
    fat: float = Field(default=0.0, ge=0)
    sugar: float = Field(default=0.0, ge=0)
    servings: float = Field(default=1.0, gt=0)

    def to_domain(self) -> MealItem:
        return MealItem(**self.model_dump())


class MealCreate(BaseModel):
    """Body for creating a meal."""

    name: str
    description: str | None = None
    items: list[MealItemIn] = Field(default_factory=list)


class MealUpdate(BaseModel):
    """Body for updating a meal."""

    name: str | None = None
    description: str | None = None
    items: list[MealItemIn] | None = None


class MealLogRequest(BaseModel):
    """Optional timestamp when logging a meal."""

    logged_at: datetime | None = None


class RecipeRequest(BaseModel):
    """Body for recipe suggestions."""

    ingredient: str
