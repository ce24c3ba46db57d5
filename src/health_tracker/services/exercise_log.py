"""Exercise log service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from health_tracker.domain.enums import ExerciseType
from health_tracker.domain.exercise import ExerciseEntry
from health_tracker.services.errors import ValidationError


class ExerciseRepository(Protocol):
    """Persistence interface for exercise sessions."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: int,
        name: str,
        exercise_type: ExerciseType,
        duration: int,
        calories_burned: int,
        entry_date: date,
        notes: str | None,
    ) -> ExerciseEntry:
        """Create an exercise entry."""

    def list_entries(self, user_id: int, start: date, end: date) -> list[ExerciseEntry]:
        """Return entries in the inclusive range, newest first."""

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        """Delete a user's entry."""


@dataclass
class ExerciseLogService:
    """Service for logging exercise."""

    repository: ExerciseRepository

    def list_entries(
        self, user_id: int, start: date, end: date | None = None
    ) -> list[ExerciseEntry]:
        return self.repository.list_entries(user_id, start, end or start)

    def add_entry(  # noqa: PLR0913
        self,
        user_id: int,
        *,
        name: str,
        exercise_type: ExerciseType,
        duration: int,
        calories_burned: int,
        entry_date: date,
        notes: str | None = None,
    ) -> ExerciseEntry:
        """Log an exercise session."""
        if not name.strip():
            raise ValidationError("Exercise name is required")
        return self.repository.create_entry(
            user_id,
            name.strip(),
            exercise_type,
            duration,
            calories_burned,
            entry_date,
            notes or None,
        )

    def delete_entry(self, user_id: int, entry_id: int | None) -> None:
        if entry_id is None:
            raise ValidationError("Entry ID required")
        self.repository.delete_entry(user_id, entry_id)
