"""Supabase repository for exercise sessions."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from health_tracker.adapters.rows import as_int, parse_date, parse_datetime
from health_tracker.domain.enums import ExerciseType
from health_tracker.domain.exercise import ExerciseEntry
from health_tracker.services.exercise_log import ExerciseRepository


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for the exercise log."""

    client: Client

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
        response = (
            self.client.table("exercises")
            .insert(
                {
                    "user_id": user_id,
                    "name": name,
                    "type": str(exercise_type),
                    "duration": duration,
                    "calories_burned": calories_burned,
                    "date": entry_date.isoformat(),
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create exercise entry")
        return _parse_exercise(response.data[0])

    def list_entries(
        self, user_id: int, start: date, end: date
    ) -> list[ExerciseEntry]:
        response = (
            self.client.table("exercises")
            .select("*")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_exercise(row) for row in response.data or []]

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self.client.table("exercises").delete().eq("id", entry_id).eq(
            "user_id", user_id
        ).execute()


def _parse_exercise(row: dict[str, object]) -> ExerciseEntry:
    return ExerciseEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        name=str(row.get("name", "")),
        type=ExerciseType(row.get("type", ExerciseType.CARDIO)),
        duration=as_int(row.get("duration")),
        calories_burned=as_int(row.get("calories_burned")),
        date=parse_date(row.get("date")) or date.min,
        notes=row.get("notes") or None,
        created_at=parse_datetime(row.get("created_at")),
    )
