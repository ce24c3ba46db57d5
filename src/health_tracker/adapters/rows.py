"""Parsing helpers for PostgREST rows."""

from datetime import date, datetime


def parse_date(raw: object) -> date | None:
    """Parse a ``YYYY-MM-DD`` column value."""
    if isinstance(raw, str) and raw:
        return date.fromisoformat(raw[:10])
    return None


def parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def as_float(raw: object, default: float = 0.0) -> float:
    return float(raw) if isinstance(raw, int | float | str) and raw != "" else default


def as_optional_float(raw: object) -> float | None:
    return float(raw) if isinstance(raw, int | float | str) and raw != "" else None


def as_int(raw: object, default: int = 0) -> int:
    return int(raw) if isinstance(raw, int | float | str) and raw != "" else default
