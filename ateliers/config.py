"""
Atelier settings using pydantic-settings.

Environment variables (prefix: ATELIERS_):
    ATELIERS_LOG_LEVEL     - Logging level for the demo runner (default: WARNING)
    ATELIERS_STARTING_CASH - Balance of the seeded players (default: 1500)
    ATELIERS_BANK_CASH     - Initial cash held by the bank (default: 0)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_log_level(value: str) -> str:
    """Upper-case a logging level name, rejecting unknown ones."""
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


class AtelierSettings(BaseSettings):
    """Settings for the demonstration runner."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="ATELIERS_",
    )

    log_level: str = Field(default="WARNING", description="Root logging level.")
    starting_cash: int = Field(default=1500, ge=0, description="Seeded player balance.")
    bank_cash: int = Field(default=0, description="Initial bank cash.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        return normalize_log_level(value)


@lru_cache
def get_settings() -> AtelierSettings:
    """Return cached settings instance."""
    return AtelierSettings()
