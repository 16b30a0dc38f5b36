"""Configuration management for rpgcharacter using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="RPGCHARACTER_",
        extra="ignore",
    )

    # Numerics
    tolerance: float = Field(
        default=1e-6,
        gt=0,
        description="Relative/absolute tolerance for function pair round trips",
    )

    # Update engine
    parallel_update_threshold: int = Field(
        default=8,
        ge=1,
        description="Minimum attribute count before an update fans out over an executor",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console", description="Log format (console or json)"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
