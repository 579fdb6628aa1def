"""Nutrition summaries over food logs."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from nutriscan.domain.errors import InvalidInputError
from nutriscan.domain.food_logs import FoodLog, NutritionTotals
from nutriscan.domain.summary import DailyTotals, DaySummary, PeriodSummary
from nutriscan.services.food_logs import FoodLogRepository

PERIOD_DAYS = {"week": 7, "month": 30}


@dataclass
class SummaryService:
    """Compute day, week and month summaries in the caller's timezone."""

    repository: FoodLogRepository

    def get_day(
        self, user_id: UUID, timezone_name: str = "UTC", now: datetime | None = None
    ) -> DaySummary:
        """Return today's totals with the logs behind them."""
        tz = _zone(timezone_name)
        today = _local_now(tz, now).date()
        start, end = _bounds(today, today, tz)
        logs = self.repository.list_logs(user_id, start, end)
        day_logs = [log for log in logs if _local_day(log, tz) == today]
        return DaySummary(day=today, totals=_round(_sum(day_logs)), logs=day_logs)

    def get_period(
        self,
        user_id: UUID,
        period: str,
        timezone_name: str = "UTC",
        now: datetime | None = None,
    ) -> PeriodSummary:
        """Return a rolling week or month ending today."""
        days = PERIOD_DAYS.get(period)
        if days is None:
            raise InvalidInputError(f"Unknown period: {period}")
        tz = _zone(timezone_name)
        today = _local_now(tz, now).date()
        first_day = today - timedelta(days=days - 1)
        start, end = _bounds(first_day, today, tz)
        logs = self.repository.list_logs(user_id, start, end)

        by_day: dict[date, NutritionTotals] = {
            first_day + timedelta(days=offset): NutritionTotals()
            for offset in range(days)
        }
        logged_days: set[date] = set()
        for log in logs:
            day = _local_day(log, tz)
            if day not in by_day:
                continue
            by_day[day] = by_day[day] + log.totals()
            logged_days.add(day)

        totals = NutritionTotals()
        for day_totals in by_day.values():
            totals = totals + day_totals
        days_with_data = len(logged_days)
        return PeriodSummary(
            period=period,
            start=first_day,
            end=today,
            daily=[
                DailyTotals(day=day, totals=_round(day_totals))
                for day, day_totals in by_day.items()
            ],
            totals=_round(totals),
            averages=_round(_divide(totals, days_with_data)),
            days_with_data=days_with_data,
            tracking_rate=round(days_with_data / days * 100),
        )


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError) as exc:
        raise InvalidInputError(f"Unknown timezone: {name}") from exc


def _local_now(tz: ZoneInfo, now: datetime | None) -> datetime:
    return (now or datetime.now(tz=tz)).astimezone(tz)


def _bounds(first: date, last: date, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Inclusive datetime range covering whole local days."""
    start = datetime.combine(first, datetime.min.time(), tzinfo=tz)
    end = datetime.combine(last + timedelta(days=1), datetime.min.time(), tzinfo=tz)
    return start, end - timedelta(microseconds=1)


def _local_day(log: FoodLog, tz: ZoneInfo) -> date:
    return log.logged_at.astimezone(tz).date()


def _sum(logs: list[FoodLog]) -> NutritionTotals:
    total = NutritionTotals()
    for log in logs:
        total = total + log.totals()
    return total


def _divide(totals: NutritionTotals, days: int) -> NutritionTotals:
    if days <= 0:
        return NutritionTotals()
    return NutritionTotals(
        calories=totals.calories / days,
        protein=totals.protein / days,
        carbs=totals.carbs / days,
        fat=totals.fat / days,
        sugar=totals.sugar / days,
    )


def _round(totals: NutritionTotals) -> NutritionTotals:
    return NutritionTotals(
        calories=round(totals.calories),
        protein=round(totals.protein, 1),
        carbs=round(totals.carbs, 1),
        fat=round(totals.fat, 1),
        sugar=round(totals.sugar, 1),
    )
