"""Supabase repository for weight history."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from health_tracker.adapters.rows import as_float, parse_date, parse_datetime
from health_tracker.domain.weight import WeightEntry
from health_tracker.services.weight_log import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weight history."""

    client: Client

    def create_entry(
        self, user_id: int, weight_kg: float, entry_date: date, notes: str | None
    ) -> WeightEntry:
        response = (
            self.client.table("weight_history")
            .insert(
                {
                    "user_id": user_id,
                    "weight": weight_kg,
                    "date": entry_date.isoformat(),
                    "notes": notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create weight entry")
        return _parse_weight(response.data[0])

    def list_entries(
        self,
        user_id: int,
        limit: int,
        start: date | None = None,
        end: date | None = None,
    ) -> list[WeightEntry]:
        """Return weigh-ins, newest date first."""
        query = self.client.table("weight_history").select("*").eq("user_id", user_id)
        if start is not None and end is not None:
            query = query.gte("date", start.isoformat()).lte("date", end.isoformat())
        response = query.order("date", desc=True).limit(limit).execute()
        return [_parse_weight(row) for row in response.data or []]

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        self.client.table("weight_history").delete().eq("id", entry_id).eq(
            "user_id", user_id
        ).execute()


def _parse_weight(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        weight_kg=as_float(row.get("weight")),
        date=parse_date(row.get("date")) or date.min,
        notes=row.get("notes") or None,
        created_at=parse_datetime(row.get("created_at")),
    )
