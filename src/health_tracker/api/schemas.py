"""Request body models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from health_tracker.domain.enums import (
    ActivityLevel,
    ExerciseType,
    Gender,
    Goal,
    MealType,
    UnitSystem,
)


class CamelModel(BaseModel):
    """Accepts camelCase keys as sent by the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(CamelModel):
    email: str | None = None
    password: str | None = None
    name: str | None = None


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class UpdateNameRequest(CamelModel):
    name: object = None


class ProfileRequest(CamelModel):
    """Profile upsert; required fields are checked by the route."""

    age: int | None = Field(default=None, gt=0)
    gender: Gender | None = None
    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    activity_level: ActivityLevel | None = None
    goal: Goal | None = None
    target_weight: float | None = Field(default=None, gt=0)
    unit_system: UnitSystem = UnitSystem.METRIC
    use_custom_macros: bool = False
    custom_calories: int = Field(default=0, ge=0)
    custom_protein: int = Field(default=0, ge=0)
    custom_carbs: int = Field(default=0, ge=0)
    custom_fat: int = Field(default=0, ge=0)


class CustomFoodRequest(CamelModel):
    name: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    serving_size: str


class FoodEntryCreateRequest(CamelModel):
    food_item_id: int | None = None
    custom_food: CustomFoodRequest | None = None
    servings: float = Field(gt=0)
    meal_type: MealType
    entry_date: date = Field(alias="date")


class FoodEntryUpdateRequest(CamelModel):
    id: int | None = None
    servings: float | None = Field(default=None, gt=0)
    meal_type: MealType | None = None


class ExerciseEntryCreateRequest(CamelModel):
    name: str
    type: ExerciseType
    duration: int = Field(ge=0)
    calories_burned: int = Field(ge=0)
    entry_date: date = Field(alias="date")
    notes: str | None = None


class WeightEntryCreateRequest(CamelModel):
    weight: float = Field(gt=0)
    entry_date: date | None = Field(default=None, alias="date")
    notes: str | None = None
    update_profile: bool = False
    unit_system: UnitSystem = UnitSystem.METRIC


class NutritionEstimateRequest(CamelModel):
    food_query: str | None = None


class ExerciseEstimateRequest(CamelModel):
    exercise_name: str | None = None


class RecipeSearchRequest(CamelModel):
    query: str | None = None
