"""Domain models for weight history."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WeightEntry:
    """A body-weight measurement, stored in kilograms."""

    id: int
    user_id: int
    weight_kg: float
    date: date
    notes: str | None = None
    created_at: datetime | None = None
