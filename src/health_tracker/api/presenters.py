"""JSON formatting for API responses."""

from datetime import date, datetime

from health_tracker.domain.exercise import ExerciseEntry
from health_tracker.domain.food import FoodEntry, FoodItem
from health_tracker.domain.models import DailyGoals, UserProfile, UserRecord
from health_tracker.domain.rollup import DailySummary, WindowResult, WindowTotals
from health_tracker.domain.weight import WeightEntry


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def format_user(user: UserRecord) -> dict[str, object]:
    """User without the password hash."""
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "createdAt": _iso(user.created_at),
    }


def format_profile(profile: UserProfile | None) -> dict[str, object] | None:
    if profile is None:
        return None
    return {
        "userId": profile.user_id,
        "age": profile.age,
        "gender": str(profile.gender),
        "height": profile.height_cm,
        "weight": profile.weight_kg,
        "activityLevel": str(profile.activity_level),
        "goal": str(profile.goal),
        "targetWeight": profile.target_weight_kg,
        "unitSystem": str(profile.unit_system),
        "useCustomMacros": profile.use_custom_macros,
        "customCalories": profile.custom_calories,
        "customProtein": profile.custom_protein,
        "customCarbs": profile.custom_carbs,
        "customFat": profile.custom_fat,
        "updatedAt": _iso(profile.updated_at),
    }


def format_goals(goals: DailyGoals) -> dict[str, int]:
    return {
        "calories": goals.calories,
        "protein": goals.protein,
        "carbs": goals.carbs,
        "fat": goals.fat,
    }


def format_food_item(item: FoodItem | None) -> dict[str, object] | None:
    if item is None:
        return None
    return {
        "id": item.id,
        "name": item.name,
        "calories": item.calories,
        "protein": item.protein,
        "carbs": item.carbs,
        "fat": item.fat,
        "servingSize": item.serving_size,
        "isCustom": item.is_custom,
    }


def format_food_entry(entry: FoodEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "foodItemId": entry.food_item_id,
        "servings": entry.servings,
        "mealType": str(entry.meal_type),
        "date": _iso(entry.date),
        "createdAt": _iso(entry.created_at),
        "foodItem": format_food_item(entry.food_item),
    }


def format_exercise(entry: ExerciseEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "name": entry.name,
        "type": str(entry.type),
        "duration": entry.duration,
        "caloriesBurned": entry.calories_burned,
        "date": _iso(entry.date),
        "notes": entry.notes,
        "createdAt": _iso(entry.created_at),
    }


def format_weight(entry: WeightEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "weight": entry.weight_kg,
        "date": _iso(entry.date),
        "notes": entry.notes,
        "createdAt": _iso(entry.created_at),
    }


def _format_day(day: DailySummary) -> dict[str, object]:
    return {
        "date": day.date.isoformat(),
        "calories": day.calories,
        "protein": day.protein,
        "carbs": day.carbs,
        "fat": day.fat,
        "caloriesBurned": day.calories_burned,
        "exerciseMinutes": day.exercise_minutes,
        "weight": day.weight_kg,
    }


def _format_totals(totals: WindowTotals) -> dict[str, float]:
    return {
        "calories": totals.calories,
        "protein": totals.protein,
        "carbs": totals.carbs,
        "fat": totals.fat,
        "caloriesBurned": totals.calories_burned,
        "exerciseMinutes": totals.exercise_minutes,
    }


def format_window(result: WindowResult) -> dict[str, object]:
    """History payload consumed by the dashboard charts."""
    return {
        "type": str(result.kind) if result.kind else None,
        "startDate": result.start_date.isoformat(),
        "endDate": result.end_date.isoformat(),
        "dailyData": [_format_day(day) for day in result.daily],
        "totals": _format_totals(result.totals),
        "averages": _format_totals(result.averages),
    }
