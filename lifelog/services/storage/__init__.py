"""
Storage Services Package

Provides the abstract storage interface and the JSON file corpus
that implements it.
"""

from lifelog.services.storage.interface import (
    CorruptCorpusError,
    CorruptDataError,
    EmptyCorpusError,
    MonthLogStorageInterface,
    StorageError,
)
from lifelog.services.storage.json_files import JsonMonthLogStorage

__all__ = [
    # Interfaces
    "MonthLogStorageInterface",
    # Exceptions
    "CorruptCorpusError",
    "CorruptDataError",
    "EmptyCorpusError",
    "StorageError",
    # JSON file implementation
    "JsonMonthLogStorage",
]
