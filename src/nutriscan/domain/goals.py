"""Models for personal nutrition goals."""

from typing import Literal

from pydantic import BaseModel, Field

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
Gender = Literal["male", "female"]
WeightGoal = Literal["lose", "gain", "maintain"]


class GoalTemplate(BaseModel):
    """Preset macro ratios for a nutrition goal."""

    name: str
    description: str
    protein_per_kg: float
    fat_per_kg: float
    sugar_limit: float
    weight_goal: WeightGoal
    weekly_target_kg: float


class GoalProfile(BaseModel):
    """Body metrics and preferences used to compute goals."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(gt=0, lt=130)
    gender: Gender = "male"
    activity_level: ActivityLevel = "moderate"
    template: str
    target_weight_kg: float | None = Field(default=None, gt=0)
    weekly_target_kg: float | None = Field(default=None, ge=0, le=2)


class BodyMassIndex(BaseModel):
    """Body mass index with its category label."""

    value: float
    category: str


class GoalTargets(BaseModel):
    """Daily nutrition targets."""

    calories: int
    protein: int
    carbs: int
    fat: int
    sugar: float
    template: str
    bmr: int
    tdee: int
    bmi: BodyMassIndex
