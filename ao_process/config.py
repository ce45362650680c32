"""Process Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Store limits default to 64-char keys and 1000-char values

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Limits live in settings, not in the store: tests build stores with tighter limits
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Identity (shown in Info responses and startup logs)
    process_name: str = "AO Process (Python)"

    # State store
    max_key_length: int = 64
    max_value_length: int = 1000
    lock_timeout_seconds: float = 5.0

    @field_validator("max_key_length", "max_value_length")
    @classmethod
    def limits_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("store limits must be at least 1")
        return v

    # HTTP host
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
