"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    ninja_api_key: str | None = None
    ninja_base_url: str = "https://api.api-ninjas.com/v1"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    default_timezone: str = "UTC"
    cors_allow_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS origin list; empty means allow all."""
    if raw is None:
        return ["*"]
    origins = [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
    return origins or ["*"]
