"""Nutrition and exercise lookups against API Ninjas."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from health_tracker.adapters.ninja_client import NinjaClient
from health_tracker.services.cache import Cache
from health_tracker.services.errors import ExternalServiceError, ValidationError

_EXERCISE_FILTERS = ("name", "type", "muscle", "difficulty")

_logger = logging.getLogger(__name__)


@dataclass
class LookupService:
    """Cached lookups with a short retry on upstream failure."""

    client: NinjaClient
    cache: Cache
    nutrition_ttl_seconds: int = 3600
    exercise_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search_nutrition(self, query: str | None) -> list[dict[str, object]]:
        """Return nutrition facts for a free-text food query."""
        if not query or not query.strip():
            raise ValidationError("Query parameter is required")
        cache_key = f"ninja:nutrition:{query.strip().lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        items = await self._call_with_retry(
            lambda: self.client.nutrition(query.strip()), action="nutrition"
        )
        self.cache.set(cache_key, items, ttl_seconds=self.nutrition_ttl_seconds)
        _logger.info("Nutrition search: query=%s results=%s", query, len(items))
        return items

    async def search_exercises(
        self, filters: dict[str, str | None]
    ) -> list[dict[str, object]]:
        """Return exercises matching any of name, type, muscle, difficulty."""
        params = {
            key: value.strip()
            for key, value in filters.items()
            if key in _EXERCISE_FILTERS and value and value.strip()
        }
        cache_key = "ninja:exercises:" + "&".join(
            f"{key}={value.lower()}" for key, value in sorted(params.items())
        )
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        exercises = await self._call_with_retry(
            lambda: self.client.exercises(params), action="exercises"
        )
        self.cache.set(cache_key, exercises, ttl_seconds=self.exercise_ttl_seconds)
        _logger.info("Exercise search: params=%s results=%s", params, len(exercises))
        return exercises

    async def _call_with_retry(
        self,
        func: Callable[[], Awaitable[list[dict[str, object]]]],
        *,
        action: str,
    ) -> list[dict[str, object]]:
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Lookup %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise ExternalServiceError("API Ninjas", str(exc)) from exc
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
