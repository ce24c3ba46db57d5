"""Profile and daily goal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from health_tracker.api.deps import current_user_id
from health_tracker.api.presenters import format_goals, format_profile
from health_tracker.api.schemas import ProfileRequest
from health_tracker.domain.models import UserProfile
from health_tracker.services.errors import ValidationError

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(prefix="/api/profile", tags=["profile"])

_REQUIRED_FIELDS = ("age", "gender", "height", "weight", "activity_level", "goal")


@router.get("")
async def get_profile(
    request: Request, user_id: int = Depends(current_user_id)
) -> dict[str, object]:
    """Return the profile, or null before one is created."""
    container: AppContainer = request.app.state.container
    return {"profile": format_profile(container.profile_service.get_profile(user_id))}


@router.post("")
async def save_profile(
    body: ProfileRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Create or replace the profile."""
    container: AppContainer = request.app.state.container
    if any(getattr(body, name) is None for name in _REQUIRED_FIELDS):
        raise ValidationError("Missing required fields")
    profile = UserProfile(
        user_id=user_id,
        age=body.age,
        gender=body.gender,
        height_cm=body.height,
        weight_kg=body.weight,
        activity_level=body.activity_level,
        goal=body.goal,
        target_weight_kg=body.target_weight,
        unit_system=body.unit_system,
        use_custom_macros=body.use_custom_macros,
        custom_calories=body.custom_calories,
        custom_protein=body.custom_protein,
        custom_carbs=body.custom_carbs,
        custom_fat=body.custom_fat,
    )
    saved = container.profile_service.save_profile(profile)
    return {"profile": format_profile(saved)}


@router.get("/goals")
async def get_goals(
    request: Request, user_id: int = Depends(current_user_id)
) -> dict[str, object]:
    """Return daily calorie and macro targets."""
    container: AppContainer = request.app.state.container
    return {"goals": format_goals(container.profile_service.get_goals(user_id))}
