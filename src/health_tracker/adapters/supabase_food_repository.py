"""Supabase repository for food items and entries."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from health_tracker.adapters.rows import as_float, parse_date, parse_datetime
from health_tracker.domain.enums import MealType
from health_tracker.domain.food import FoodEntry, FoodItem, NewFoodItem
from health_tracker.services.food_log import FoodRepository

_ITEM_COLUMNS = (
    "id, user_id, name, calories, protein, carbs, fat, serving_size, is_custom"
)
_ENTRY_COLUMNS = (
    "id, user_id, food_item_id, servings, meal_type, date, created_at, "
    f"food_items({_ITEM_COLUMNS})"
)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for the food log."""

    client: Client

    def create_custom_food(self, user_id: int, food: NewFoodItem) -> FoodItem:
        """Insert a user-owned food item."""
        response = (
            self.client.table("food_items")
            .insert(
                {
                    "user_id": user_id,
                    "name": food.name,
                    "calories": food.calories,
                    "protein": food.protein,
                    "carbs": food.carbs,
                    "fat": food.fat,
                    "serving_size": food.serving_size,
                    "is_custom": 1,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_item(response.data[0])

    def create_entry(  # noqa: PLR0913
        self,
        user_id: int,
        food_item_id: int,
        servings: float,
        meal_type: MealType,
        entry_date: date,
    ) -> FoodEntry:
        """Insert a food entry row."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "user_id": user_id,
                    "food_item_id": food_item_id,
                    "servings": servings,
                    "meal_type": str(meal_type),
                    "date": entry_date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_entry(response.data[0])

    def list_entries(self, user_id: int, start: date, end: date) -> list[FoodEntry]:
        """Return entries with their food items."""
        response = (
            self.client.table("food_entries")
            .select(_ENTRY_COLUMNS)
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def update_entry(
        self, user_id: int, entry_id: int, changes: dict[str, object]
    ) -> FoodEntry | None:
        """Update a user's entry; None when no row matched."""
        if not changes:
            response = (
                self.client.table("food_entries")
                .select(_ENTRY_COLUMNS)
                .eq("id", entry_id)
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        else:
            response = (
                self.client.table("food_entries")
                .update(changes)
                .eq("id", entry_id)
                .eq("user_id", user_id)
                .execute()
            )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self.client.table("food_entries").delete().eq("id", entry_id).eq(
            "user_id", user_id
        ).execute()


def _parse_item(row: dict[str, object]) -> FoodItem:
    user_id = row.get("user_id")
    return FoodItem(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        calories=as_float(row.get("calories")),
        protein=as_float(row.get("protein")),
        carbs=as_float(row.get("carbs")),
        fat=as_float(row.get("fat")),
        serving_size=str(row.get("serving_size") or ""),
        user_id=int(user_id) if user_id is not None else None,
        is_custom=bool(row.get("is_custom")),
    )


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    item_row = row.get("food_items")
    return FoodEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        food_item_id=int(row["food_item_id"]),
        servings=as_float(row.get("servings"), default=1.0),
        meal_type=MealType(row.get("meal_type", MealType.SNACK)),
        date=parse_date(row.get("date")) or date.min,
        created_at=parse_datetime(row.get("created_at")),
        food_item=_parse_item(item_row) if isinstance(item_row, dict) else None,
    )
