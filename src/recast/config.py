"""Configuration management for the Recast client."""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.recast.ai/v1/request"


class Settings(BaseSettings):
    """Client settings loaded from RECAST_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="recast_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Authentication and language defaults
    token: str | None = None
    language: str | None = None  # None or "" = automatic detection

    # API
    api_url: str = DEFAULT_API_URL
    timeout: float = 30.0

    # Transport selection
    transport: str = "http"
    replay_file: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    @field_validator("transport")
    @classmethod
    def validate_transport(cls, v: str) -> str:
        """Validate transport is one of the supported options."""
        valid_transports = {"http", "replay"}
        if v.lower() not in valid_transports:
            raise ValueError(
                f"Invalid RECAST_TRANSPORT: '{v}'. "
                f"Must be one of: {', '.join(sorted(valid_transports))}"
            )
        return v.lower()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format is console or json."""
        if v.lower() not in {"console", "json"}:
            raise ValueError(
                f"Invalid RECAST_LOG_FORMAT: '{v}'. Must be one of: console, json"
            )
        return v.lower()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Timeout must be positive."""
        if v <= 0:
            raise ValueError("RECAST_TIMEOUT must be greater than 0")
        return v

    @model_validator(mode="after")
    def validate_transport_config(self) -> "Settings":
        """Validate transport-specific configuration."""
        if self.transport == "replay" and not self.replay_file:
            raise ValueError(
                "RECAST_REPLAY_FILE is required when RECAST_TRANSPORT=replay. "
                "Example: RECAST_REPLAY_FILE=recordings/hello.json"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get settings singleton - lazy loaded when first accessed."""
    return Settings()
