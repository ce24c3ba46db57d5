"""Domain models for the exercise log."""

from dataclasses import dataclass
from datetime import date, datetime

from health_tracker.domain.enums import ExerciseType


@dataclass(frozen=True)
class ExerciseEntry:
    """A logged exercise session."""

    id: int
    user_id: int
    name: str
    type: ExerciseType
    duration: int
    calories_burned: int
    date: date
    notes: str | None = None
    created_at: datetime | None = None
