"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - Settings are passed explicitly to the dispatcher and Gemini client;
      operations never read the environment themselves

Design Decisions:
    - Defaults provided for all non-secret settings: PORT falls back to 3000
    - gemini_timeout_seconds defaults to None: the delegated call has no timeout
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Envelope
    official_email: str = ""

    # Gemini
    gemini_api_key: str = "gemini-placeholder"
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float | None = None

    @field_validator("gemini_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3000
    max_body_bytes: int = 10 * 1024

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
