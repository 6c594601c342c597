"""Configuration package."""

from lifelog.config.settings import (
    APP_NAME,
    MONTH_FILE_EXTENSION,
    LatestDatePolicy,
    LifelogSettings,
    get_settings,
)

__all__ = [
    "APP_NAME",
    "MONTH_FILE_EXTENSION",
    "LatestDatePolicy",
    "LifelogSettings",
    "get_settings",
]
