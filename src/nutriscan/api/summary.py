"""Nutrition summary and goal endpoints."""

from dataclasses import asdict
from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends

from nutriscan.api.deps import get_container, require_user
from nutriscan.api.food_logs import serialize_log
from nutriscan.containers import AppContainer
from nutriscan.domain.goals import GoalProfile, GoalTargets
from nutriscan.services.goals import GOAL_TEMPLATES, calculate_goals

router = APIRouter(prefix="/api", tags=["summary"])


@router.get("/summary/day")
async def day_summary(
    tz: str = "UTC",
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return today's totals and logs."""
    summary = container.summary_service.get_day(user_id, tz)
    return {
        "day": summary.day.isoformat(),
        "totals": asdict(summary.totals),
        "logs": [serialize_log(log) for log in summary.logs],
    }


@router.get("/summary/{period}")
async def period_summary(
    period: Literal["week", "month"],
    tz: str = "UTC",
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a rolling week or month summary."""
    summary = container.summary_service.get_period(user_id, period, tz)
    return {
        "period": summary.period,
        "start": summary.start.isoformat(),
        "end": summary.end.isoformat(),
        "daily": [
            {"day": entry.day.isoformat(), **asdict(entry.totals)}
            for entry in summary.daily
        ],
        "totals": asdict(summary.totals),
        "averages": asdict(summary.averages),
        "days_with_data": summary.days_with_data,
        "tracking_rate": summary.tracking_rate,
    }


@router.get("/goals/templates")
async def goal_templates(
    _user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """List the available goal templates."""
    return {
        "templates": {
            key: template.model_dump() for key, template in GOAL_TEMPLATES.items()
        }
    }


@router.post("/goals")
async def compute_goals(
    profile: GoalProfile,
    _user_id: UUID = Depends(require_user),
) -> GoalTargets:
    """Compute daily targets from body metrics and a goal template."""
    return calculate_goals(profile)
