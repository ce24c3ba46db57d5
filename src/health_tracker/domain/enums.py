"""Closed enumerations shared across the domain."""

from enum import StrEnum


class MealType(StrEnum):
    """Meal slot for a food entry."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ExerciseType(StrEnum):
    """Kind of logged exercise."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    SPORTS = "sports"
    KNEES_OVER_TOES = "knees-over-toes"
    PLYOS = "plyos"


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


class Goal(StrEnum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class UnitSystem(StrEnum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class WindowKind(StrEnum):
    """Calendar window used for history summaries."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
