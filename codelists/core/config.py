"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. DATABASE_URL driver is validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SUPPORTED_DRIVERS = ("postgresql+asyncpg", "sqlite+aiosqlite")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. When database_url is empty the
    app still starts, but every endpoint that needs storage answers 503.
    """

    # App
    app_name: str = "legislative-codelists"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: Postgres in production, SQLite (aiosqlite) for local runs and tests
    database_url: str = ""
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py); ignored for SQLite
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    # Identity of the caller as established by the upstream auth layer
    actor_header_name: str = "X-Actor"

    # Audit log
    audit_system_actor: str = "system"
    audit_default_page_size: int = 25
    audit_max_page_size: int = 200

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database_url(self) -> "Settings":
        """Reject DATABASE_URL values that do not use a supported async driver."""
        if self.database_url and not self.database_url.startswith(_SUPPORTED_DRIVERS):
            raise ValueError(
                f"DATABASE_URL must use one of {', '.join(_SUPPORTED_DRIVERS)}, "
                f"got: {self.database_url.split('://', 1)[0]!r}"
            )
        if self.audit_default_page_size < 1 or self.audit_max_page_size < 1:
            raise ValueError("Audit page sizes must be positive.")
        if self.audit_default_page_size > self.audit_max_page_size:
            raise ValueError(
                "AUDIT_DEFAULT_PAGE_SIZE must not exceed AUDIT_MAX_PAGE_SIZE."
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        """True when the configured backend is SQLite."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
