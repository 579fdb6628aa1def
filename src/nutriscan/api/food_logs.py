"""Food log endpoints."""

from dataclasses import asdict
from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, status

from nutriscan.api.deps import get_container, require_user
from nutriscan.api.models import FoodLogCreate, FoodLogItemUpdate
from nutriscan.containers import AppContainer
from nutriscan.domain.food_logs import FoodLog

router = APIRouter(prefix="/api/log", tags=["food-logs"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_log(
    body: FoodLogCreate,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log consumed items."""
    log = container.food_log_service.create_log(
        user_id,
        [item.to_domain() for item in body.items],
        logged_at=body.logged_at,
        notes=body.notes,
    )
    return serialize_log(log)


@router.get("")
async def list_logs(
    start: datetime | None = None,
    end: datetime | None = None,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """List the caller's logs, newest first."""
    logs = container.food_log_service.list_logs(user_id, start, end)
    return [serialize_log(log) for log in logs]


@router.put("/{log_id}/items/{index}")
async def update_item(
    log_id: UUID,
    index: int,
    body: FoodLogItemUpdate,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Update fields of one logged item."""
    log = container.food_log_service.update_item(
        user_id, log_id, index, body.model_dump(exclude_unset=True, exclude_none=True)
    )
    return {"message": "Item updated successfully", "log": serialize_log(log)}


@router.delete("/{log_id}/items/{index}")
async def delete_item(
    log_id: UUID,
    index: int,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Remove one logged item, deleting the log when it becomes empty."""
    log_deleted = container.food_log_service.delete_item(user_id, log_id, index)
    message = (
        "Item and log deleted successfully" if log_deleted else "Item deleted successfully"
    )
    return {"message": message, "log_deleted": log_deleted}


def serialize_log(log: FoodLog) -> dict[str, object]:
    """Return a JSON-friendly food log with its totals."""
    totals = log.totals()
    return {
        "id": str(log.id),
        "logged_at": log.logged_at.isoformat(),
        "notes": log.notes,
        "items": [asdict(item) for item in log.items],
        "totals": asdict(totals),
    }
