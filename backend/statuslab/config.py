"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a STATUSLAB_-prefixed environment variable
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all settings: works out-of-the-box with `statuslab`
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="STATUSLAB_", case_sensitive=False,
    )

    app_name: str = "StatusLab API"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Fixed target for /statuscodes/notHereAnymore and willRedirectToTarget
    redirect_location: str = "https://example.com/new-location"

    @field_validator("redirect_location")
    @classmethod
    def require_absolute_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("redirect_location must be an absolute http(s) URL")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
