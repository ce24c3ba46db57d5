"""User accounts: signup, login and name changes."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

import bcrypt

from health_tracker.domain.models import UserRecord
from health_tracker.services.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from health_tracker.services.tokens import TokenService

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
BCRYPT_ROUNDS = 10

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user accounts."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given lower-cased email."""

    def get_by_id(self, user_id: int) -> UserRecord | None:
        """Return the user with the given id."""

    def create_user(self, email: str, password_hash: str, name: str) -> UserRecord:
        """Create and return a new user."""

    def update_name(self, user_id: int, name: str) -> UserRecord | None:
        """Rename a user and return the updated record."""


@dataclass(frozen=True)
class AuthResult:
    """User and a freshly issued token."""

    user: UserRecord
    token: str


@dataclass
class UserService:
    """Application service for account lifecycle actions."""

    repository: UserRepository
    tokens: TokenService

    def signup(
        self, email: str | None, password: str | None, name: str | None
    ) -> AuthResult:
        """Register a new account and return it with a token."""
        if not email or not password or not name:
            raise ValidationError("Email, password, and name are required")
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email format")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        normalized = email.lower()
        if self.repository.get_by_email(normalized):
            raise ConflictError("User already exists")

        user = self.repository.create_user(normalized, hash_password(password), name)
        _logger.info("Created user id=%s", user.id)
        return AuthResult(user=user, token=self.tokens.issue(user.id, user.email))

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """Check credentials and return the user with a token."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.repository.get_by_email(email.lower())
        if user is None or not check_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return AuthResult(user=user, token=self.tokens.issue(user.id, user.email))

    def get_user(self, user_id: int) -> UserRecord:
        """Return the user or raise when it no longer exists."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update_name(self, user_id: int, name: object) -> UserRecord:
        """Set a new display name."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Name is required")
        user = self.repository.update_name(user_id, name.strip())
        if user is None:
            raise NotFoundError("User not found")
        return user


def hash_password(password: str) -> str:
    """Return a bcrypt hash for the password."""
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Return True when the password matches the stored hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
