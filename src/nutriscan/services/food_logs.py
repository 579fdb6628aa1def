"""Food logging service."""

import logging
from dataclasses import dataclass, fields, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from nutriscan.domain.errors import InvalidInputError, NotFoundError
from nutriscan.domain.food_logs import FoodLog, FoodLogItem

_ITEM_FIELDS = frozenset(field.name for field in fields(FoodLogItem))

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_log(
        self,
        user_id: UUID,
        logged_at: datetime,
        items: list[FoodLogItem],
        notes: str | None,
    ) -> FoodLog:
        """Create a food log and return it."""

    def list_logs(
        self, user_id: UUID, start: datetime | None, end: datetime | None
    ) -> list[FoodLog]:
        """Return a user's logs, newest first, optionally within a range."""

    def get_log(self, log_id: UUID) -> FoodLog | None:
        """Return a log by id, if present."""

    def update_items(self, log_id: UUID, items: list[FoodLogItem]) -> FoodLog:
        """Replace the items of a log and return it."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete a log."""


@dataclass
class FoodLogService:
    """Application service for a user's food logs."""

    repository: FoodLogRepository

    def create_log(
        self,
        user_id: UUID,
        items: list[FoodLogItem],
        logged_at: datetime | None = None,
        notes: str | None = None,
    ) -> FoodLog:
        """Persist consumed items as one log entry."""
        if not items:
            raise InvalidInputError("At least one item is required")
        resolved_at = logged_at or datetime.now(tz=UTC)
        if resolved_at.tzinfo is None:
            resolved_at = resolved_at.replace(tzinfo=UTC)
        log = self.repository.create_log(user_id, resolved_at, items, notes)
        _logger.info("Food log created: user=%s items=%s", user_id, len(items))
        return log

    def list_logs(
        self,
        user_id: UUID,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[FoodLog]:
        """Return logs; the range applies only when both bounds are given."""
        if start is None or end is None:
            return self.repository.list_logs(user_id, None, None)
        return self.repository.list_logs(user_id, start, end)

    def update_item(
        self, user_id: UUID, log_id: UUID, index: int, changes: dict[str, object]
    ) -> FoodLog:
        """Merge field changes into one item of a log."""
        log = self._get_owned(user_id, log_id)
        _check_index(log, index)
        known = {key: value for key, value in changes.items() if key in _ITEM_FIELDS}
        items = list(log.items)
        items[index] = replace(items[index], **known)
        return self.repository.update_items(log_id, items)

    def delete_item(self, user_id: UUID, log_id: UUID, index: int) -> bool:
        """Remove one item; return True when the emptied log was deleted."""
        log = self._get_owned(user_id, log_id)
        _check_index(log, index)
        items = [item for position, item in enumerate(log.items) if position != index]
        if not items:
            self.repository.delete_log(log_id)
            _logger.info("Food log %s deleted with its last item", log_id)
            return True
        self.repository.update_items(log_id, items)
        return False

    def _get_owned(self, user_id: UUID, log_id: UUID) -> FoodLog:
        log = self.repository.get_log(log_id)
        if log is None or log.user_id != user_id:
            raise NotFoundError("Log not found")
        return log


def _check_index(log: FoodLog, index: int) -> None:
    if index < 0 or index >= len(log.items):
        raise InvalidInputError("Invalid item index")
