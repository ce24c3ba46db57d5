"""Domain models for daily rollups."""

from dataclasses import dataclass, field
from datetime import date

from health_tracker.domain.enums import WindowKind


@dataclass(frozen=True)
class NutritionRecord:
    """Food entry joined with its per-serving macros."""

    date: date | None
    servings: float | None = None
    calories_per_serving: float | None = None
    protein_per_serving: float | None = None
    carbs_per_serving: float | None = None
    fat_per_serving: float | None = None


@dataclass(frozen=True)
class ExerciseRecord:
    """Exercise burn and duration for one session."""

    date: date | None
    calories_burned: int | None = None
    duration_minutes: int | None = None


@dataclass(frozen=True)
class WeightSample:
    """Body weight recorded on a day."""

    date: date | None
    weight_kg: float | None = None


@dataclass
class DailySummary:
    """Zero-filled roll-up for one calendar day."""

    date: date
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    calories_burned: int = 0
    exercise_minutes: int = 0
    weight_kg: float | None = None


@dataclass(frozen=True)
class WindowTotals:
    """Field-wise values across a window."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    calories_burned: float = 0
    exercise_minutes: float = 0


@dataclass(frozen=True)
class WindowResult:
    """Daily summaries plus totals and averages for a window."""

    start_date: date
    end_date: date
    daily: list[DailySummary] = field(default_factory=list)
    totals: WindowTotals = field(default_factory=WindowTotals)
    averages: WindowTotals = field(default_factory=WindowTotals)
    kind: WindowKind | None = None
