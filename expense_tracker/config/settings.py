"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every setting can be overridden with an EXPENSE_TRACKER_* environment
variable or a line in a local .env file.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage
    data_file: Path = Field(
        default=Path("expenses.json"),
        description="Path to the JSON ledger document"
    )
    export_file: Path = Field(
        default=Path("expenses.csv"),
        description="Default target for the export command"
    )

    # Presentation
    currency_symbol: str = Field(
        default="$",
        min_length=1,
        max_length=5,
        description="Symbol printed before every amount"
    )

    # Logging
    log_level: str = Field(
        default="ERROR",
        description="Minimum level for diagnostic logs on stderr"
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Render logs for humans or as JSON lines"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept the standard logging level names."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
