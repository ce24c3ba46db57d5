"""LLM-backed nutrition estimates, exercise classification and recipes."""

import logging
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from health_tracker.domain.enums import ExerciseType
from health_tracker.domain.lookup import (
    ExerciseEstimate,
    NutritionEstimate,
    Recipe,
    RecipeList,
)
from health_tracker.services.errors import ExternalServiceError, ValidationError

CLASSIFIABLE_EXERCISE_TYPES = (
    ExerciseType.CARDIO,
    ExerciseType.STRENGTH,
    ExerciseType.FLEXIBILITY,
    ExerciseType.SPORTS,
)
DEFAULT_EXERCISE_TYPE = ExerciseType.CARDIO
DEFAULT_CALORIES_PER_MINUTE = 7.0
RECIPE_COUNT = 10

ModelT = TypeVar("ModelT", bound=BaseModel)

NUTRITION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "serving_size": {"type": "string"},
        "calories": {"type": "number"},
        "protein": {"type": "number"},
        "carbs": {"type": "number"},
        "fat": {"type": "number"},
        "fiber": {"type": "number"},
    },
    "required": [
        "name",
        "serving_size",
        "calories",
        "protein",
        "carbs",
        "fat",
        "fiber",
    ],
    "additionalProperties": False,
}

EXERCISE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "type": {
            "type": "string",
            "enum": [str(t) for t in CLASSIFIABLE_EXERCISE_TYPES],
        },
        "calories_per_minute": {"type": "number"},
    },
    "required": ["type", "calories_per_minute"],
    "additionalProperties": False,
}

RECIPES_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recipes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string"},
                    "servings": {"type": "string"},
                    "ingredients": {"type": "string"},
                    "instructions": {"type": "string"},
                },
                "required": ["title", "servings", "ingredients", "instructions"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["recipes"],
    "additionalProperties": False,
}

_EXERCISE_PROMPT = """You are a fitness expert. Given an exercise name, classify it \
as exactly one of cardio, strength, flexibility or sports, and estimate calories \
burned per minute for an average adult.

Exercise: "{name}"

Guidelines:
- cardio: running, cycling, swimming, rowing, jump rope (8-12 kcal/min)
- strength: weightlifting, bodyweight and resistance training (5-8 kcal/min)
- flexibility: yoga, stretching, pilates (3-5 kcal/min)
- sports: basketball, soccer, tennis (7-12 kcal/min depending on intensity)"""

_RECIPE_PROMPT = """Find {count} recipes related to: "{query}"

Dietary guidelines:
- "keto", "ketogenic" or "low carb": high-fat recipes under 10g net carbs per serving
- "carnivore": only animal products (meat, fish, eggs, dairy)
- "paleo": no grains, legumes or dairy
- "vegan": no animal products at all
- "vegetarian": no meat or fish; dairy and eggs allowed
- "high protein": at least 30g protein per serving
- "healthy" or "clean": whole foods, minimal processing, no added sugars

Write servings as "serves X" and separate ingredients with the | character. \
Strictly follow any dietary restriction mentioned."""

_logger = logging.getLogger(__name__)


class StructuredOutputClient(Protocol):
    """Interface for LLM calls that return JSON matching a schema."""

    async def complete(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        """Return the parsed JSON output."""


@dataclass
class EstimateService:
    """Prepares prompts and validates structured LLM output."""

    client: StructuredOutputClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def estimate_nutrition(self, food_query: str | None) -> NutritionEstimate:
        """Estimate macros for a typical serving of ``food_query``."""
        if not food_query or not food_query.strip():
            raise ValidationError("Food query is required")
        prompt = (
            f'Analyze the nutritional content of: "{food_query.strip()}". '
            "Use reasonable estimates for a typical serving; give serving_size "
            "as an amount such as 100g, 1 cup or 1 medium, and macros in grams."
        )
        raw = await self._complete(prompt, "nutrition_estimate", NUTRITION_SCHEMA)
        return _validate(NutritionEstimate, raw)

    async def estimate_exercise(self, exercise_name: str | None) -> ExerciseEstimate:
        """Classify an exercise and estimate its burn rate."""
        if not exercise_name or not exercise_name.strip():
            raise ValidationError("Exercise name is required")
        name = exercise_name.strip()
        raw = await self._complete(
            _EXERCISE_PROMPT.format(name=name), "exercise_estimate", EXERCISE_SCHEMA
        )
        exercise_type = raw.get("type")
        if exercise_type not in CLASSIFIABLE_EXERCISE_TYPES:
            exercise_type = DEFAULT_EXERCISE_TYPE
        rate = raw.get("calories_per_minute")
        if isinstance(rate, bool) or not isinstance(rate, int | float) or rate <= 0:
            rate = DEFAULT_CALORIES_PER_MINUTE
        return ExerciseEstimate(
            name=name, type=str(exercise_type), calories_per_minute=float(rate)
        )

    async def find_recipes(self, query: str | None) -> list[Recipe]:
        """Suggest recipes for a query, honouring dietary keywords."""
        if not query or not query.strip():
            raise ValidationError("Recipe query is required")
        prompt = _RECIPE_PROMPT.format(count=RECIPE_COUNT, query=query.strip())
        raw = await self._complete(prompt, "recipe_list", RECIPES_SCHEMA)
        return _validate(RecipeList, raw).recipes

    async def _complete(
        self, prompt: str, schema_name: str, schema: dict[str, object]
    ) -> dict[str, object]:
        try:
            return await self.client.complete(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=prompt,
                schema_name=schema_name,
                schema=schema,
            )
        except Exception as exc:
            _logger.exception("LLM call failed: schema=%s", schema_name)
            raise ExternalServiceError("OpenAI", str(exc)) from exc


def _validate(model: type[ModelT], raw: dict[str, object]) -> ModelT:
    try:
        return model.model_validate(raw)
    except PydanticValidationError as exc:
        raise ExternalServiceError("OpenAI", "unexpected response shape") from exc
