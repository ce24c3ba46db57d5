"""Account endpoints: signup, login, current user and rename."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from health_tracker.api.deps import current_user_id
from health_tracker.api.presenters import format_user
from health_tracker.api.schemas import LoginRequest, SignupRequest, UpdateNameRequest

if TYPE_CHECKING:
    from health_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/auth/signup", status_code=status.HTTP_201_CREATED)
async def signup(body: SignupRequest, request: Request) -> dict[str, object]:
    """Create an account and return it with a token."""
    container: AppContainer = request.app.state.container
    result = container.user_service.signup(body.email, body.password, body.name)
    return {"user": format_user(result.user), "token": result.token}


@router.post("/auth/login")
async def login(body: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a token."""
    container: AppContainer = request.app.state.container
    result = container.user_service.login(body.email, body.password)
    return {"user": format_user(result.user), "token": result.token}


@router.get("/auth/me")
async def me(
    request: Request, user_id: int = Depends(current_user_id)
) -> dict[str, object]:
    """Return the authenticated user."""
    container: AppContainer = request.app.state.container
    return {"user": format_user(container.user_service.get_user(user_id))}


@router.post("/user/name")
async def update_name(
    body: UpdateNameRequest,
    request: Request,
    user_id: int = Depends(current_user_id),
) -> dict[str, object]:
    """Change the authenticated user's display name."""
    container: AppContainer = request.app.state.container
    user = container.user_service.update_name(user_id, body.name)
    return {"user": format_user(user)}
