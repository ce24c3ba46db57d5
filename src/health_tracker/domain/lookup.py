"""Models for LLM-backed nutrition, exercise and recipe lookups."""

from pydantic import BaseModel, Field


class NutritionEstimate(BaseModel):
    """Estimated macros for a typical serving of a food."""

    name: str
    serving_size: str
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float = Field(default=0, ge=0)


class ExerciseEstimate(BaseModel):
    """Classification and burn rate for an exercise name."""

    name: str
    type: str
    calories_per_minute: float


class Recipe(BaseModel):
    """Recipe suggestion."""

    title: str
    servings: str
    ingredients: str
    instructions: str


class RecipeList(BaseModel):
    recipes: list[Recipe]
