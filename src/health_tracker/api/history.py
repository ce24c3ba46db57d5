"""Historical rollup endpoint."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from health_tracker.api.deps import current_user_id, today
from health_tracker.api.presenters import format_window
from health_tracker.domain.enums import WindowKind
from health_tracker.services.errors import ValidationError

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["history"])


@router.get("/history")
async def history(
    request: Request,
    kind: str | None = Query(default=None, alias="type"),
    anchor: str | None = Query(default=None, alias="date"),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Return per-day totals plus window totals and averages.

    Empty ``type`` and ``date`` values fall back to the current week.
    """
    container: AppContainer = request.app.state.container
    result = container.history_service.get_window(
        user_id,
        kind or WindowKind.WEEK,
        _parse_anchor(anchor) or today(container),
    )
    return format_window(result)


def _parse_anchor(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError("Invalid date. Use YYYY-MM-DD") from exc
