"""Domain models for the food log."""

from dataclasses import dataclass
from datetime import date, datetime

from health_tracker.domain.enums import MealType


@dataclass(frozen=True)
class FoodItem:
    """Food with per-serving macros."""

    id: int
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_size: str
    user_id: int | None = None
    is_custom: bool = False


@dataclass(frozen=True)
class NewFoodItem:
    """User-supplied custom food before it is stored."""

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    serving_size: str


@dataclass(frozen=True)
class FoodEntry:
    """A logged portion of a food item."""

    id: int
    user_id: int
    food_item_id: int
    servings: float
    meal_type: MealType
    date: date
    created_at: datetime | None = None
    food_item: FoodItem | None = None
