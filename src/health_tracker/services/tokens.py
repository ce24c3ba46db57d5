"""JWT issuance and verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from health_tracker.services.errors import AuthenticationError

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@dataclass
class TokenService:
    """Signs and verifies HS256 bearer tokens."""

    secret: str
    algorithm: str = "HS256"
    expires_days: int = 7

    def issue(self, user_id: int, email: str) -> str:
        """Return a signed token for the user."""
        now = datetime.now(tz=UTC)
        payload = {
            "sub": str(user_id),
            "userId": user_id,
            "email": email,
            "iat": now,
            "exp": now + timedelta(days=self.expires_days),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """Verify signature and expiry, then return the user id."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.PyJWTError as exc:
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from exc

        raw_id = payload.get("userId", payload.get("sub"))
        try:
            return int(raw_id)
        except (TypeError, ValueError) as exc:
            raise AuthenticationError(INVALID_TOKEN_MESSAGE) from exc
