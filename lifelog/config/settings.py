"""
Configuration Management for lifelog

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The only thing most users ever need is the platform default data directory,
so every setting has a default and nothing is required at startup.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from platformdirs import user_data_dir
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "lifelog"
MONTH_FILE_EXTENSION = "json"


class LatestDatePolicy(str, Enum):
    """
    How the last browsable calendar date is chosen.

    CURRENT_MONTH always covers the real current month, so today is
    selectable even before anything was written this month.
    STORED_DATA stops at the end of the newest month file on disk.

    Warning: STORED_DATA gives up the today-is-selectable guarantee. On an
    empty corpus the range is only the first of the current month, and a
    corpus whose newest month is in the past ends before today.
    """
    CURRENT_MONTH = "current_month"
    STORED_DATA = "stored_data"


class LifelogSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from LIFELOG_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIFELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Optional[Path] = Field(
        default=None,
        description="Corpus root; defaults to the platform user data dir + 'lifelog'"
    )
    latest_date_policy: LatestDatePolicy = Field(
        default=LatestDatePolicy.CURRENT_MONTH,
        description="How the last browsable date is computed"
    )
    log_level: str = Field(
        default="WARNING",
        description="Stdlib log level for structlog output"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept stdlib level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {allowed}")
        return v.upper()

    @property
    def resolved_data_dir(self) -> Path:
        """The corpus root with the platform default applied."""
        if self.data_dir is not None:
            return self.data_dir.expanduser()
        return Path(user_data_dir(APP_NAME, appauthor=False))


@lru_cache()
def get_settings() -> LifelogSettings:
    """
    Get application settings (cached).

    Uses LRU cache so the data directory is resolved once per process.
    Call get_settings.cache_clear() to reload if needed.
    """
    return LifelogSettings()
