"""Daily rollups of nutrition, exercise and weight over calendar windows."""

import calendar
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Protocol

from health_tracker.domain.enums import WindowKind
from health_tracker.domain.rollup import (
    DailySummary,
    ExerciseRecord,
    NutritionRecord,
    WeightSample,
    WindowResult,
    WindowTotals,
)
from health_tracker.services.errors import ValidationError

_SUNDAY_OFFSET = 1

_logger = logging.getLogger(__name__)


class HistoryRepository(Protocol):
    """Range queries feeding the rollup, all bounds inclusive."""

    def list_nutrition(
        self, user_id: int, start: date, end: date
    ) -> list[NutritionRecord]:
        """Return food entries joined with their macros."""

    def list_exercise(
        self, user_id: int, start: date, end: date
    ) -> list[ExerciseRecord]:
        """Return exercise sessions."""

    def list_weights(self, user_id: int, start: date, end: date) -> list[WeightSample]:
        """Return weight samples ordered by date."""


@dataclass
class HistoryService:
    """Service that loads a window of records and rolls them up per day."""

    repository: HistoryRepository

    def get_window(self, user_id: int, kind: str, anchor: date) -> WindowResult:
        """Return the rollup for the day, week or month containing ``anchor``."""
        window_kind, start, end = resolve_window(kind, anchor)
        _logger.info(
            "History request: user_id=%s type=%s start=%s end=%s",
            user_id,
            window_kind,
            start,
            end,
        )
        result = aggregate(
            start,
            end,
            self.repository.list_nutrition(user_id, start, end),
            self.repository.list_exercise(user_id, start, end),
            self.repository.list_weights(user_id, start, end),
        )
        return replace(result, kind=window_kind)


def resolve_window(kind: str, anchor: date) -> tuple[WindowKind, date, date]:
    """Return the inclusive bounds of the window of ``kind`` around ``anchor``.

    Weeks start on Sunday. Months run from the first to the last calendar day.
    """
    try:
        window_kind = WindowKind(kind)
    except ValueError as exc:
        raise ValidationError('Invalid type. Use "day", "week" or "month"') from exc

    if window_kind is WindowKind.DAY:
        return window_kind, anchor, anchor
    if window_kind is WindowKind.WEEK:
        days_since_sunday = (anchor.weekday() + _SUNDAY_OFFSET) % 7
        start = anchor - timedelta(days=days_since_sunday)
        return window_kind, start, start + timedelta(days=6)
    last_day = calendar.monthrange(anchor.year, anchor.month)[1]
    return window_kind, anchor.replace(day=1), anchor.replace(day=last_day)


def aggregate(
    start: date,
    end: date,
    nutrition: Iterable[NutritionRecord],
    exercise: Iterable[ExerciseRecord],
    weights: Iterable[WeightSample],
) -> WindowResult:
    """Roll three record sets up into one zero-filled summary per day.

    Records dated outside ``[start, end]`` are ignored. A missing serving count
    counts as one serving; other missing numbers count as zero. When several
    weight samples share a day the last one wins.
    """
    summaries: dict[date, DailySummary] = {}
    for offset in range((end - start).days + 1):
        day = start + timedelta(days=offset)
        summaries[day] = DailySummary(date=day)

    for record in nutrition:
        summary = summaries.get(record.date) if record.date else None
        if summary is None:
            continue
        multiplier = record.servings or 1
        summary.calories += (record.calories_per_serving or 0) * multiplier
        summary.protein += (record.protein_per_serving or 0) * multiplier
        summary.carbs += (record.carbs_per_serving or 0) * multiplier
        summary.fat += (record.fat_per_serving or 0) * multiplier

    for record in exercise:
        summary = summaries.get(record.date) if record.date else None
        if summary is None:
            continue
        summary.calories_burned += record.calories_burned or 0
        summary.exercise_minutes += record.duration_minutes or 0

    for sample in weights:
        summary = summaries.get(sample.date) if sample.date else None
        if summary is None or sample.weight_kg is None:
            continue
        summary.weight_kg = sample.weight_kg

    daily = list(summaries.values())
    totals = _sum_daily(daily)
    return WindowResult(
        start_date=start,
        end_date=end,
        daily=daily,
        totals=totals,
        averages=_average(totals, max(len(daily), 1)),
    )


def _sum_daily(daily: list[DailySummary]) -> WindowTotals:
    return WindowTotals(
        calories=sum(day.calories for day in daily),
        protein=sum(day.protein for day in daily),
        carbs=sum(day.carbs for day in daily),
        fat=sum(day.fat for day in daily),
        calories_burned=sum(day.calories_burned for day in daily),
        exercise_minutes=sum(day.exercise_minutes for day in daily),
    )


def _average(totals: WindowTotals, days: int) -> WindowTotals:
    return WindowTotals(
        calories=round(totals.calories / days),
        protein=round(totals.protein / days),
        carbs=round(totals.carbs / days),
        fat=round(totals.fat / days),
        calories_burned=round(totals.calories_burned / days),
        exercise_minutes=round(totals.exercise_minutes / days),
    )
