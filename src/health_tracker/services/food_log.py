"""Food log service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from health_tracker.domain.enums import MealType
from health_tracker.domain.food import FoodEntry, FoodItem, NewFoodItem
from health_tracker.services.errors import NotFoundError, ValidationError


class FoodRepository(Protocol):
    """Persistence interface for food items and entries."""

    def create_custom_food(self, user_id: int, food: NewFoodItem) -> FoodItem:
        """Store a user-owned food item."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: int,
        food_item_id: int,
        servings: float,
        meal_type: MealType,
        entry_date: date,
    ) -> FoodEntry:
        """Create a food entry."""

    def list_entries(self, user_id: int, start: date, end: date) -> list[FoodEntry]:
        """Return entries in the inclusive range, newest first."""

    def update_entry(
        self, user_id: int, entry_id: int, changes: dict[str, object]
    ) -> FoodEntry | None:
        """Apply changes to a user's entry and return it."""

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        """Delete a user's entry."""


@dataclass
class FoodLogService:
    """Service for logging food."""

    repository: FoodRepository

    def list_entries(
        self, user_id: int, start: date, end: date | None = None
    ) -> list[FoodEntry]:
        """Return entries for one day, or an inclusive range."""
        return self.repository.list_entries(user_id, start, end or start)

    def add_entry(  # noqa: PLR0913
        self,
        user_id: int,
        *,
        servings: float,
        meal_type: MealType,
        entry_date: date,
        food_item_id: int | None = None,
        custom_food: NewFoodItem | None = None,
    ) -> FoodEntry:
        """Log a food, creating the custom item first when given."""
        if custom_food is not None:
            food_item_id = self.repository.create_custom_food(user_id, custom_food).id
        if food_item_id is None:
            raise ValidationError("foodItemId or customFood is required")
        return self.repository.create_entry(
            user_id, food_item_id, servings, meal_type, entry_date
        )

    def update_entry(
        self,
        user_id: int,
        entry_id: int | None,
        servings: float | None = None,
        meal_type: MealType | None = None,
    ) -> FoodEntry:
        """Change servings and/or meal type of an entry."""
        if entry_id is None:
            raise ValidationError("Entry ID required")
        changes: dict[str, object] = {}
        if servings is not None:
            changes["servings"] = servings
        if meal_type is not None:
            changes["meal_type"] = str(meal_type)
        entry = self.repository.update_entry(user_id, entry_id, changes)
        if entry is None:
            raise NotFoundError("Entry not found")
        return entry

    def delete_entry(self, user_id: int, entry_id: int | None) -> None:
        if entry_id is None:
            raise ValidationError("Entry ID required")
        self.repository.delete_entry(user_id, entry_id)
