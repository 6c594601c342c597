"""Services package."""

from lifelog.services.storage import (
    CorruptCorpusError,
    CorruptDataError,
    EmptyCorpusError,
    JsonMonthLogStorage,
    MonthLogStorageInterface,
    StorageError,
)

__all__ = [
    # Storage services
    "CorruptCorpusError",
    "CorruptDataError",
    "EmptyCorpusError",
    "JsonMonthLogStorage",
    "MonthLogStorageInterface",
    "StorageError",
]
