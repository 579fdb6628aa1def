"""Supabase repository for food logs."""

from dataclasses import asdict, dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutriscan.domain.food_logs import FoodLog, FoodLogItem
from nutriscan.services.food_logs import FoodLogRepository

_COLUMNS = "id, user_id, logged_at, items, notes"


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs with items stored as JSON."""

    client: Client

    def create_log(
        self,
        user_id: UUID,
        logged_at: datetime,
        items: list[FoodLogItem],
        notes: str | None,
    ) -> FoodLog:
        """Create a food log row and return it."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "logged_at": logged_at.isoformat(),
                    "items": [asdict(item) for item in items],
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return _parse_log(response.data[0])

    def list_logs(
        self, user_id: UUID, start: datetime | None, end: datetime | None
    ) -> list[FoodLog]:
        """Return logs for a user, newest first."""
        query = (
            self.client.table("food_logs").select(_COLUMNS).eq("user_id", str(user_id))
        )
        if start is not None and end is not None:
            query = query.gte("logged_at", start.isoformat()).lte(
                "logged_at", end.isoformat()
            )
        response = query.order("logged_at", desc=True).execute()
        return [_parse_log(row) for row in response.data or []]

    def get_log(self, log_id: UUID) -> FoodLog | None:
        """Return a log by id."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def update_items(self, log_id: UUID, items: list[FoodLogItem]) -> FoodLog:
        """Replace the items of a log."""
        response = (
            self.client.table("food_logs")
            .update({"items": [asdict(item) for item in items]})
            .eq("id", str(log_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food log")
        return _parse_log(response.data[0])

    def delete_log(self, log_id: UUID) -> None:
        """Delete a log row."""
        self.client.table("food_logs").delete().eq("id", str(log_id)).execute()


def _parse_log(row: dict[str, object]) -> FoodLog:
    raw_items = row.get("items")
    return FoodLog(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        items=[
            _parse_item(item)
            for item in (raw_items if isinstance(raw_items, list) else [])
            if isinstance(item, dict)
        ],
        notes=row.get("notes"),
    )


def _parse_item(item: dict[str, object]) -> FoodLogItem:
    return FoodLogItem(
        name=str(item.get("name") or ""),
        calories=float(item.get("calories") or 0.0),
        protein=float(item.get("protein") or 0.0),
        carbs=float(item.get("carbs") or 0.0),
        fat=float(item.get("fat") or 0.0),
        sugar=float(item.get("sugar") or 0.0),
        barcode=str(item.get("barcode") or ""),
        serving_size=str(item.get("serving_size") or ""),
        quantity=float(item.get("quantity") or 1.0),
    )
