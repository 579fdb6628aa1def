"""Models for recipe suggestions."""

from typing import Literal

from pydantic import BaseModel, Field


class RecipeIdea(BaseModel):
    """A single suggested recipe."""

    title: str
    description: str
    difficulty: Literal["Easy", "Medium", "Hard"]
    cook_time: str
    servings: str


class RecipeIdeas(BaseModel):
    """Structured output for recipe suggestions."""

    recipes: list[RecipeIdea] = Field(min_length=1)
