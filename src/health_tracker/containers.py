"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from health_tracker.adapters.ninja_client import HttpxNinjaClient
from health_tracker.adapters.openai_client import OpenAIStructuredClient
from health_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from health_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from health_tracker.adapters.supabase_history_repository import (
    SupabaseHistoryRepository,
)
from health_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from health_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from health_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from health_tracker.config import Settings
from health_tracker.services.cache import InMemoryCache
from health_tracker.services.estimates import EstimateService
from health_tracker.services.exercise_log import ExerciseLogService
from health_tracker.services.food_log import FoodLogService
from health_tracker.services.lookup import LookupService
from health_tracker.services.profiles import ProfileService
from health_tracker.services.rollup import HistoryService
from health_tracker.services.tokens import TokenService
from health_tracker.services.users import UserService
from health_tracker.services.weight_log import WeightLogService


async def _no_resources() -> None:
    return None


@dataclass
class AppContainer:
    """Holds application-wide dependencies.

    Lookup and estimate services are None when their API keys are not set.
    """

    settings: Settings
    tokens: TokenService
    user_service: UserService
    profile_service: ProfileService
    food_log_service: FoodLogService
    exercise_log_service: ExerciseLogService
    weight_log_service: WeightLogService
    history_service: HistoryService
    lookup_service: LookupService | None = None
    estimate_service: EstimateService | None = None
    close_resources: Callable[[], Awaitable[None]] = _no_resources


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    tokens = TokenService(
        secret=resolved_settings.jwt_secret,
        algorithm=resolved_settings.jwt_algorithm,
        expires_days=resolved_settings.jwt_expires_days,
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    closers: list[Callable[[], Awaitable[None]]] = []

    lookup_service = None
    if resolved_settings.ninja_api_key:
        ninja_client = HttpxNinjaClient.create(
            api_key=resolved_settings.ninja_api_key,
            base_url=resolved_settings.ninja_base_url,
        )
        lookup_service = LookupService(client=ninja_client, cache=InMemoryCache())
        closers.append(ninja_client.close)

    estimate_service = None
    if resolved_settings.openai_api_key:
        openai_client = OpenAIStructuredClient.create(resolved_settings.openai_api_key)
        estimate_service = EstimateService(
            client=openai_client,
            model=resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
        )
        closers.append(openai_client.close)

    async def close_resources() -> None:
        for close in closers:
            await close()

    return AppContainer(
        settings=resolved_settings,
        tokens=tokens,
        user_service=UserService(SupabaseUserRepository(supabase_client), tokens),
        profile_service=profile_service,
        food_log_service=FoodLogService(SupabaseFoodRepository(supabase_client)),
        exercise_log_service=ExerciseLogService(
            SupabaseExerciseRepository(supabase_client)
        ),
        weight_log_service=WeightLogService(
            repository=SupabaseWeightRepository(supabase_client),
            profile_service=profile_service,
        ),
        history_service=HistoryService(SupabaseHistoryRepository(supabase_client)),
        lookup_service=lookup_service,
        estimate_service=estimate_service,
        close_resources=close_resources,
    )
