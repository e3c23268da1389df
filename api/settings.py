"""
Application settings using pydantic-settings for type-safe configuration.

Environment variables are read once at startup (and from .env when present)
and cached via get_settings().
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from household.logging_config import LEVEL_NAMES


class Settings(BaseSettings):
    """Hearth API settings. Defaults suit local development."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === CORS Configuration ===
    # Kept as a string for env parsing; see allowed_origins
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    # === Logging ===
    log_level: str = Field(
        default="INFO",
        description="Log verbosity: TRACE, DEBUG, INFO, WARNING, or ERROR",
    )

    # === Name Formatting ===
    max_batch_size: int = Field(
        default=500,
        description="Maximum number of people accepted per batch formatting or relationship graph request",
    )

    # === Graph Settings ===
    graph_random_seed: int = Field(
        default=42,
        description="Random seed for reproducible relationship graph layouts",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        v = v.upper()
        if v not in LEVEL_NAMES:
            raise ValueError(f"Invalid LOG_LEVEL: {v}. Must be one of {', '.join(LEVEL_NAMES)}")
        return v

    @field_validator("max_batch_size", mode="after")
    @classmethod
    def validate_max_batch_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Invalid MAX_BATCH_SIZE: {v}. Must be at least 1")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
