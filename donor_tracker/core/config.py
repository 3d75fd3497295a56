"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "donor-tracker"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: SQLite file; parent directories are created on startup.
    database_path: str = "data/donor_tracker.db"
    database_echo: bool = False

    # Task workflow: when False, approved/rejected tasks cannot be re-transitioned.
    allow_status_correction: bool = False

    # Upstream donor-data API
    donor_api_base_url: str = "https://bc-cancer-faux.onrender.com"
    donor_api_timeout_seconds: float = 30.0

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database_and_upstream(self) -> "Settings":
        """Validate database path and upstream URL."""
        if not self.database_path.strip():
            raise ValueError(
                "DATABASE_PATH must not be empty. Set in environment or .env file."
            )
        if not self.donor_api_base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"DONOR_API_BASE_URL must be an http(s) URL, got: {self.donor_api_base_url!r}"
            )
        return self


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
