"""Supabase range queries feeding the daily rollup."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from health_tracker.adapters.rows import as_int, as_optional_float, parse_date
from health_tracker.domain.rollup import ExerciseRecord, NutritionRecord, WeightSample
from health_tracker.services.rollup import HistoryRepository


@dataclass
class SupabaseHistoryRepository(HistoryRepository):
    """Three independent range queries over the log tables."""

    client: Client

    def list_nutrition(
        self, user_id: int, start: date, end: date
    ) -> list[NutritionRecord]:
        """Return food entries joined with per-serving macros."""
        response = (
            self.client.table("food_entries")
            .select("date, servings, food_items(calories, protein, carbs, fat)")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .execute()
        )
        records = []
        for row in response.data or []:
            item = row.get("food_items")
            item = item if isinstance(item, dict) else {}
            records.append(
                NutritionRecord(
                    date=parse_date(row.get("date")),
                    servings=as_optional_float(row.get("servings")),
                    calories_per_serving=as_optional_float(item.get("calories")),
                    protein_per_serving=as_optional_float(item.get("protein")),
                    carbs_per_serving=as_optional_float(item.get("carbs")),
                    fat_per_serving=as_optional_float(item.get("fat")),
                )
            )
        return records

    def list_exercise(
        self, user_id: int, start: date, end: date
    ) -> list[ExerciseRecord]:
        response = (
            self.client.table("exercises")
            .select("date, calories_burned, duration")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .execute()
        )
        return [
            ExerciseRecord(
                date=parse_date(row.get("date")),
                calories_burned=as_int(row.get("calories_burned")),
                duration_minutes=as_int(row.get("duration")),
            )
            for row in response.data or []
        ]

    def list_weights(self, user_id: int, start: date, end: date) -> list[WeightSample]:
        """Return weigh-ins oldest first so later samples win."""
        response = (
            self.client.table("weight_history")
            .select("date, weight, created_at")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .order("created_at", desc=False)
            .execute()
        )
        return [
            WeightSample(
                date=parse_date(row.get("date")),
                weight_kg=as_optional_float(row.get("weight")),
            )
            for row in response.data or []
        ]
