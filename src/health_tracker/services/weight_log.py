"""Weight history service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from health_tracker.domain.enums import UnitSystem
from health_tracker.domain.weight import WeightEntry
from health_tracker.services.errors import ValidationError
from health_tracker.services.profiles import ProfileService
from health_tracker.services.units import to_kg

DEFAULT_HISTORY_LIMIT = 30

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for weight history."""

    def create_entry(
        self, user_id: int, weight_kg: float, entry_date: date, notes: str | None
    ) -> WeightEntry:
        """Create a weight entry."""

    def list_entries(
        self,
        user_id: int,
        limit: int,
        start: date | None = None,
        end: date | None = None,
    ) -> list[WeightEntry]:
        """Return entries newest date first, optionally within a range."""

    def delete_entry(self, user_id: int, entry_id: int) -> None:
        """Delete a user's entry."""


@dataclass
class WeightLogService:
    """Service for recording body weight."""

    repository: WeightRepository
    profile_service: ProfileService

    def list_entries(
        self,
        user_id: int,
        limit: int = DEFAULT_HISTORY_LIMIT,
        start: date | None = None,
        end: date | None = None,
    ) -> list[WeightEntry]:
        """Return recent weigh-ins."""
        if limit < 1:
            raise ValidationError("limit must be positive")
        if (start is None) != (end is None):
            start = end = None
        return self.repository.list_entries(user_id, limit, start, end)

    def add_entry(  # noqa: PLR0913
        self,
        user_id: int,
        *,
        weight: float,
        entry_date: date,
        notes: str | None = None,
        unit_system: UnitSystem = UnitSystem.METRIC,
        update_profile: bool = False,
    ) -> WeightEntry:
        """Record a weigh-in, converting to kg, and optionally sync the profile."""
        weight_kg = to_kg(weight, unit_system)
        entry = self.repository.create_entry(
            user_id, weight_kg, entry_date, notes or None
        )
        if update_profile:
            self.profile_service.update_weight(user_id, weight_kg)
            _logger.info("Updated profile weight: user_id=%s", user_id)
        return entry

    def delete_entry(self, user_id: int, entry_id: int | None) -> None:
        if entry_id is None:
            raise ValidationError("Entry ID required")
        self.repository.delete_entry(user_id, entry_id)
