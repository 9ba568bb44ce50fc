"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The SQL connection string is only validated when the
persistence layer is first used, so the resolution core runs without it.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "content"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (SQLAlchemy async URL, e.g. postgresql+asyncpg://... or sqlite+aiosqlite://)
    database_url: str = ""
    database_echo: bool = False

    # Webspace assigned to new localized content when the editor sends none.
    default_webspace: str | None = None

    # JSON file with template definitions (view, controller, cache lifetime).
    templates_path: str | None = None

    # Tracing spans are created through the OpenTelemetry API; the host
    # process decides whether a real tracer provider is installed.
    tracing_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("default_webspace", "templates_path", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: object) -> object:
        """Treat empty env values (e.g. DEFAULT_WEBSPACE=) as unset."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    In tests, call get_settings.cache_clear() before overriding env vars so
    the next get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
