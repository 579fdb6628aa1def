"""Supabase repository for meals."""

from dataclasses import asdict, dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutriscan.domain.meals import Meal, MealItem
from nutriscan.services.meals import MealRepository

_COLUMNS = "id, user_id, name, description, items, created_at, updated_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals with items stored as JSON."""

    client: Client

    def list_meals(self, user_id: UUID) -> list[Meal]:
        """Return meals for a user, most recently updated first."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("updated_at", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(
        self, user_id: UUID, name: str, description: str, items: list[MealItem]
    ) -> Meal:
        """Create a meal row and return it."""
        response = (
            self.client.table("meals")
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "description": description,
                    "items": [asdict(item) for item in items],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def update_meal(self, meal: Meal) -> Meal:
        """Persist mutable meal fields."""
        response = (
            self.client.table("meals")
            .update(
                {
                    "name": meal.name,
                    "description": meal.description,
                    "items": [asdict(item) for item in meal.items],
                    "updated_at": meal.updated_at.isoformat(),
                }
            )
            .eq("id", str(meal.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal")
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal row."""
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()


def _parse_meal(row: dict[str, object]) -> Meal:
    raw_items = row.get("items")
    return Meal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        items=[
            MealItem(
                name=str(item.get("name") or ""),
                calories=float(item.get("calories") or 0.0),
                protein=float(item.get("protein") or 0.0),
                carbs=float(item.get("carbs") or 0.0),
                fat=float(item.get("fat") or 0.0),
                sugar=float(item.get("sugar") or 0.0),
                servings=float(item.get("servings") or 1.0),
            )
            for item in (raw_items if isinstance(raw_items, list) else [])
            if isinstance(item, dict)
        ],
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
