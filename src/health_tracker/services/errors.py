"""Service-layer exceptions mapped to HTTP responses by the API."""


class HealthTrackerError(Exception):
    """Base exception for application errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(HealthTrackerError):
    """Client input failed validation."""

    status_code = 400


class AuthenticationError(HealthTrackerError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class NotFoundError(HealthTrackerError):
    status_code = 404


class ConflictError(HealthTrackerError):
    status_code = 409


class ConfigurationError(HealthTrackerError):
    """A required setting is missing."""

    status_code = 500


class ExternalServiceError(HealthTrackerError):
    """An upstream provider failed."""

    status_code = 502

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        super().__init__(f"{service} error: {message}")
