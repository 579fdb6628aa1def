"""Domain models for nutrition summaries."""

from dataclasses import dataclass
from datetime import date

from nutriscan.domain.food_logs import FoodLog, NutritionTotals


@dataclass(frozen=True)
class DailyTotals:
    """Totals for a single calendar day."""

    day: date
    totals: NutritionTotals


@dataclass(frozen=True)
class DaySummary:
    """Today's totals and the logs that produced them."""

    day: date
    totals: NutritionTotals
    logs: list[FoodLog]


@dataclass(frozen=True)
class PeriodSummary:
    """Rolling-window breakdown with averages over logged days."""

    period: str
    start: date
    end: date
    daily: list[DailyTotals]
    totals: NutritionTotals
    averages: NutritionTotals
    days_with_data: int
    tracking_rate: int
