"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from health_tracker.api.auth import router as auth_router
from health_tracker.api.entries import router as entries_router
from health_tracker.api.history import router as history_router
from health_tracker.api.lookup import router as lookup_router
from health_tracker.api.profile import router as profile_router
from health_tracker.app_logging import configure_logging
from health_tracker.config import parse_origins
from health_tracker.containers import AppContainer
from health_tracker.services.errors import HealthTrackerError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_origins(container.settings.cors_allow_origins),
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(HealthTrackerError)
    async def handle_app_error(
        request: Request, exc: HealthTrackerError
    ) -> JSONResponse:
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": _describe_validation_error(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(entries_router)
    app.include_router(history_router)
    app.include_router(lookup_router)

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Liveness check with basic configuration facts."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "ok",
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "environment": {
                "name": state_container.settings.environment,
                "hasSupabaseUrl": bool(state_container.settings.supabase_url),
            },
        }

    return app


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
