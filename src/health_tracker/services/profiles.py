"""Profile storage and daily goal calculation."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from health_tracker.domain.enums import ActivityLevel, Gender, Goal
from health_tracker.domain.models import DailyGoals, UserProfile
from health_tracker.services.errors import NotFoundError

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
GOAL_ADJUSTMENTS = {Goal.LOSE: -500, Goal.MAINTAIN: 0, Goal.GAIN: 500}
CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARBS = 4
CALORIES_PER_GRAM_FAT = 9


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the user's profile, if one exists."""

    def upsert_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or replace the profile keyed by user id."""

    def update_weight(self, user_id: int, weight_kg: float) -> None:
        """Update the current weight on the profile."""


@dataclass
class ProfileService:
    """Service for profiles and derived goals."""

    repository: ProfileRepository

    def get_profile(self, user_id: int) -> UserProfile | None:
        return self.repository.get_profile(user_id)

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Create or update the profile."""
        stamped = replace(profile, updated_at=datetime.now(tz=UTC))
        return self.repository.upsert_profile(stamped)

    def update_weight(self, user_id: int, weight_kg: float) -> None:
        self.repository.update_weight(user_id, weight_kg)

    def get_goals(self, user_id: int) -> DailyGoals:
        """Return daily targets for the user's profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return daily_goals(profile)


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Mifflin-St Jeor BMR in kcal/day."""
    base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
    if profile.gender is Gender.MALE:
        return base + 5
    return base - 161


def total_daily_energy_expenditure(profile: UserProfile) -> int:
    multiplier = ACTIVITY_MULTIPLIERS[profile.activity_level]
    return round(basal_metabolic_rate(profile) * multiplier)


def daily_goals(profile: UserProfile) -> DailyGoals:
    """Return calorie and macro targets.

    Custom macros override the calculation. Otherwise calories follow TDEE
    adjusted for the weight goal, split 30% protein, 40% carbs, 30% fat.
    """
    if profile.use_custom_macros:
        return DailyGoals(
            calories=profile.custom_calories,
            protein=profile.custom_protein,
            carbs=profile.custom_carbs,
            fat=profile.custom_fat,
        )

    calories = total_daily_energy_expenditure(profile) + GOAL_ADJUSTMENTS[profile.goal]
    return DailyGoals(
        calories=calories,
        protein=round(calories * 0.3 / CALORIES_PER_GRAM_PROTEIN),
        carbs=round(calories * 0.4 / CALORIES_PER_GRAM_CARBS),
        fat=round(calories * 0.3 / CALORIES_PER_GRAM_FAT),
    )
