"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ScoreMode = Literal["auto", "unweighted", "weighted"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "json" or "console"

    # Scoring output
    score_precision: int = Field(default=2, ge=0, le=12)
    top_k: int = Field(default=10, ge=1)
    default_mode: ScoreMode = "auto"

    @field_validator("log_format", mode="before")
    @classmethod
    def parse_log_format(cls, v: str) -> str:
        """Normalize log format, falling back to console output."""
        value = str(v).strip().lower()
        return value if value in ("json", "console") else "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: str) -> str:
        """Upper-case the level name so it maps onto the logging module."""
        return str(v).strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
