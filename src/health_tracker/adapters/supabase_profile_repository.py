"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from health_tracker.adapters.rows import as_int, as_optional_float, parse_datetime
from health_tracker.domain.enums import ActivityLevel, Gender, Goal, UnitSystem
from health_tracker.domain.models import UserProfile
from health_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, user_id: int) -> UserProfile | None:
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def upsert_profile(self, profile: UserProfile) -> UserProfile:
        """Insert or update the profile row for the user."""
        updated_at = profile.updated_at or datetime.now(tz=UTC)
        response = (
            self.client.table("user_profiles")
            .upsert(
                {
                    "user_id": profile.user_id,
                    "age": profile.age,
                    "gender": str(profile.gender),
                    "height": profile.height_cm,
                    "weight": profile.weight_kg,
                    "activity_level": str(profile.activity_level),
                    "goal": str(profile.goal),
                    "target_weight": profile.target_weight_kg,
                    "unit_system": str(profile.unit_system),
                    "use_custom_macros": int(profile.use_custom_macros),
                    "custom_calories": profile.custom_calories,
                    "custom_protein": profile.custom_protein,
                    "custom_carbs": profile.custom_carbs,
                    "custom_fat": profile.custom_fat,
                    "updated_at": updated_at.isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile")
        return _parse_profile(response.data[0])

    def update_weight(self, user_id: int, weight_kg: float) -> None:
        self.client.table("user_profiles").update(
            {"weight": weight_kg, "updated_at": datetime.now(tz=UTC).isoformat()}
        ).eq("user_id", user_id).execute()


def _parse_profile(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        user_id=int(row["user_id"]),
        age=as_int(row.get("age")),
        gender=Gender(row.get("gender", Gender.OTHER)),
        height_cm=float(row.get("height", 0.0)),
        weight_kg=float(row.get("weight", 0.0)),
        activity_level=ActivityLevel(row.get("activity_level", ActivityLevel.MODERATE)),
        goal=Goal(row.get("goal", Goal.MAINTAIN)),
        target_weight_kg=as_optional_float(row.get("target_weight")),
        unit_system=UnitSystem(row.get("unit_system") or UnitSystem.METRIC),
        use_custom_macros=bool(row.get("use_custom_macros")),
        custom_calories=as_int(row.get("custom_calories")),
        custom_protein=as_int(row.get("custom_protein")),
        custom_carbs=as_int(row.get("custom_carbs")),
        custom_fat=as_int(row.get("custom_fat")),
        updated_at=parse_datetime(row.get("updated_at")),
    )
