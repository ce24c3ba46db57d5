"""External nutrition, exercise and recipe lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from health_tracker.api.deps import current_user_id, require_estimates, require_lookup
from health_tracker.api.schemas import (
    ExerciseEstimateRequest,
    NutritionEstimateRequest,
    RecipeSearchRequest,
)

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(
    prefix="/api", tags=["lookup"], dependencies=[Depends(current_user_id)]
)


@router.get("/nutrition/search")
async def nutrition_search(
    request: Request, query: str | None = None
) -> dict[str, object]:
    """Search nutrition facts by free text."""
    container: AppContainer = request.app.state.container
    items = await require_lookup(container).search_nutrition(query)
    return {"items": items}


@router.get("/exercise/search")
async def exercise_search(  # noqa: PLR0913
    request: Request,
    name: str | None = None,
    type: str | None = None,  # noqa: A002
    muscle: str | None = None,
    difficulty: str | None = None,
) -> dict[str, object]:
    """Search the exercise catalogue."""
    container: AppContainer = request.app.state.container
    exercises = await require_lookup(container).search_exercises(
        {"name": name, "type": type, "muscle": muscle, "difficulty": difficulty}
    )
    return {"exercises": exercises}


@router.post("/nutrition/estimate")
async def nutrition_estimate(
    body: NutritionEstimateRequest, request: Request
) -> dict[str, object]:
    """Estimate macros for a described food."""
    container: AppContainer = request.app.state.container
    estimate = await require_estimates(container).estimate_nutrition(body.food_query)
    return {
        "nutrition": {
            "name": estimate.name,
            "servingSize": estimate.serving_size,
            "calories": estimate.calories,
            "protein": estimate.protein,
            "carbs": estimate.carbs,
            "fat": estimate.fat,
            "fiber": estimate.fiber,
        }
    }


@router.post("/exercise/estimate")
async def exercise_estimate(
    body: ExerciseEstimateRequest, request: Request
) -> dict[str, object]:
    """Classify an exercise and estimate calories burned per minute."""
    container: AppContainer = request.app.state.container
    estimate = await require_estimates(container).estimate_exercise(
        body.exercise_name
    )
    return {
        "exercise": {
            "name": estimate.name,
            "type": estimate.type,
            "caloriesPerMinute": estimate.calories_per_minute,
        }
    }


@router.post("/recipes/search")
async def recipe_search(
    body: RecipeSearchRequest, request: Request
) -> dict[str, object]:
    """Suggest recipes, honouring dietary keywords in the query."""
    container: AppContainer = request.app.state.container
    recipes = await require_estimates(container).find_recipes(body.query)
    return {"recipes": [recipe.model_dump() for recipe in recipes]}
