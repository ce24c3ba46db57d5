"""Domain models for users and profiles."""

from dataclasses import dataclass
from datetime import datetime

from health_tracker.domain.enums import ActivityLevel, Gender, Goal, UnitSystem


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    email: str
    name: str
    password_hash: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class UserProfile:
    """Body metrics and goal settings for a user."""

    user_id: int
    age: int
    gender: Gender
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel
    goal: Goal
    target_weight_kg: float | None = None
    unit_system: UnitSystem = UnitSystem.METRIC
    use_custom_macros: bool = False
    custom_calories: int = 0
    custom_protein: int = 0
    custom_carbs: int = 0
    custom_fat: int = 0
    updated_at: datetime | None = None


@dataclass(frozen=True)
class DailyGoals:
    """Daily calorie and macro targets."""

    calories: int
    protein: int
    carbs: int
    fat: int
