"""Food, exercise and weight log endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request

from health_tracker.api.deps import current_user_id, today
from health_tracker.api.presenters import (
    format_exercise,
    format_food_entry,
    format_weight,
)
from health_tracker.api.schemas import (
    ExerciseEntryCreateRequest,
    FoodEntryCreateRequest,
    FoodEntryUpdateRequest,
    WeightEntryCreateRequest,
)
from health_tracker.domain.food import NewFoodItem
from health_tracker.services.weight_log import DEFAULT_HISTORY_LIMIT

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["entries"])


def _resolve_range(
    container: AppContainer,
    day: date | None,
    start: date | None,
    end: date | None,
) -> tuple[date, date]:
    if start is not None and end is not None:
        return start, end
    selected = day or today(container)
    return selected, selected


@router.get("/food-entries")
async def list_food_entries(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    start: date | None = Query(default=None, alias="startDate"),
    end: date | None = Query(default=None, alias="endDate"),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Return food entries for a day or a date range."""
    container: AppContainer = request.app.state.container
    start, end = _resolve_range(container, day, start, end)
    entries = container.food_log_service.list_entries(user_id, start, end)
    return {"entries": [format_food_entry(entry) for entry in entries]}


@router.post("/food-entries")
async def create_food_entry(
    body: FoodEntryCreateRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Log a food, optionally defining a custom food inline."""
    container: AppContainer = request.app.state.container
    custom_food = None
    if body.custom_food is not None:
        custom_food = NewFoodItem(
            name=body.custom_food.name,
            calories=body.custom_food.calories,
            protein=body.custom_food.protein,
            carbs=body.custom_food.carbs,
            fat=body.custom_food.fat,
            serving_size=body.custom_food.serving_size,
        )
    entry = container.food_log_service.add_entry(
        user_id,
        servings=body.servings,
        meal_type=body.meal_type,
        entry_date=body.entry_date,
        food_item_id=body.food_item_id,
        custom_food=custom_food,
    )
    return {"entry": format_food_entry(entry)}


@router.put("/food-entries")
async def update_food_entry(
    body: FoodEntryUpdateRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Change servings or meal type of an entry."""
    container: AppContainer = request.app.state.container
    entry = container.food_log_service.update_entry(
        user_id, body.id, servings=body.servings, meal_type=body.meal_type
    )
    return {"entry": format_food_entry(entry)}


@router.delete("/food-entries")
async def delete_food_entry(
    request: Request,
    entry_id: int | None = Query(default=None, alias="id"),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.food_log_service.delete_entry(user_id, entry_id)
    return {"success": True}


@router.get("/exercise-entries")
async def list_exercise_entries(
    request: Request,
    day: date | None = Query(default=None, alias="date"),
    start: date | None = Query(default=None, alias="startDate"),
    end: date | None = Query(default=None, alias="endDate"),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Return exercise sessions for a day or a date range."""
    container: AppContainer = request.app.state.container
    start, end = _resolve_range(container, day, start, end)
    entries = container.exercise_log_service.list_entries(user_id, start, end)
    return {"exercises": [format_exercise(entry) for entry in entries]}


@router.post("/exercise-entries")
async def create_exercise_entry(
    body: ExerciseEntryCreateRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    entry = container.exercise_log_service.add_entry(
        user_id,
        name=body.name,
        exercise_type=body.type,
        duration=body.duration,
        calories_burned=body.calories_burned,
        entry_date=body.entry_date,
        notes=body.notes,
    )
    return {"exercise": format_exercise(entry)}


@router.delete("/exercise-entries")
async def delete_exercise_entry(
    request: Request,
    entry_id: int | None = Query(default=None, alias="id"),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.exercise_log_service.delete_entry(user_id, entry_id)
    return {"success": True}


@router.get("/weight")
async def list_weight_entries(  # noqa: PLR0913
    request: Request,
    start: date | None = Query(default=None, alias="startDate"),
    end: date | None = Query(default=None, alias="endDate"),
    limit: int = Query(default=DEFAULT_HISTORY_LIMIT),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Return recent weigh-ins, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.weight_log_service.list_entries(user_id, limit, start, end)
    return {"entries": [format_weight(entry) for entry in entries]}


@router.post("/weight")
async def create_weight_entry(
    body: WeightEntryCreateRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Record a weigh-in, optionally copying it to the profile."""
    container: AppContainer = request.app.state.container
    entry = container.weight_log_service.add_entry(
        user_id,
        weight=body.weight,
        entry_date=body.entry_date or today(container),
        notes=body.notes,
        unit_system=body.unit_system,
        update_profile=body.update_profile,
    )
    return {"entry": format_weight(entry)}


@router.delete("/weight")
async def delete_weight_entry(
    request: Request,
    entry_id: int | None = Query(default=None, alias="id"),
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.weight_log_service.delete_entry(user_id, entry_id)
    return {"success": True}
