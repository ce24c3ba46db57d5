"""Request dependencies: container access and bearer authentication."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import Header, Request

from health_tracker.services.errors import AuthenticationError, ConfigurationError

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer
    from health_tracker.services.estimates import EstimateService
    from health_tracker.services.lookup import LookupService

_BEARER_PREFIX = "Bearer "


async def current_user_id(
    request: Request, authorization: str | None = Header(default=None)
) -> int:
    """Resolve the verified user id from the bearer token."""
    container: AppContainer = request.app.state.container
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise AuthenticationError("No token provided")
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return container.tokens.verify(token)


def today(container: AppContainer) -> date:
    """Return today's date in the configured timezone."""
    return datetime.now(tz=ZoneInfo(container.settings.default_timezone)).date()


def require_lookup(container: AppContainer) -> LookupService:
    if container.lookup_service is None:
        raise ConfigurationError("API key not configured")
    return container.lookup_service


def require_estimates(container: AppContainer) -> EstimateService:
    if container.estimate_service is None:
        raise ConfigurationError("OpenAI API key not configured")
    return container.estimate_service
