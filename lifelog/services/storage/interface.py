"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for corpus operations.
This allows us to:
1. Keep the store and scanner free of filesystem details
2. Point tests at a throwaway corpus
3. Change the file layout later without touching callers

The interface is intentionally small - one month log per (month, year),
plus the listing the date-range scanner needs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from lifelog.models.month_log import LifelogError, Month, MonthLog, MonthYear


class MonthLogStorageInterface(ABC):
    """
    Abstract interface for month log storage operations.

    Implementations assume exclusive single-process access to the corpus:
    there is no locking and no detection of concurrent external writers.
    """

    @abstractmethod
    def read(self, key: MonthYear) -> Optional[MonthLog]:
        """
        Read the month log stored for a key.

        Args:
            key: The month and year to read

        Returns:
            The decoded month log, or None if nothing is stored for it

        Raises:
            CorruptDataError: If stored data exists but cannot be decoded
            StorageError: If the data cannot be read
        """
        pass

    @abstractmethod
    def write(self, log: MonthLog) -> Path:
        """
        Persist a month log, replacing whatever was stored for its key.

        Args:
            log: The month log to write

        Returns:
            Where the month log was written

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def path_for(self, key: MonthYear) -> Path:
        """Canonical location of the month file for a key."""
        pass

    @abstractmethod
    def list_years(self) -> list[int]:
        """
        List the years present in the corpus, ascending.

        Raises:
            EmptyCorpusError: If the corpus root is missing or unreadable
            CorruptCorpusError: If a year entry is not a valid year
        """
        pass

    @abstractmethod
    def list_months(self, year: int) -> list[Month]:
        """
        List the months stored for a year, in calendar order.

        Raises:
            CorruptCorpusError: If a month entry is not a month name
            StorageError: If the year cannot be read
        """
        pass


class StorageError(LifelogError):
    """Base exception for storage operations."""
    pass


class CorruptDataError(StorageError):
    """A month file exists but cannot be decoded."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class CorruptCorpusError(StorageError):
    """The corpus holds a year or month entry with an unrecognized name."""
    pass


class EmptyCorpusError(StorageError):
    """The corpus root is missing or cannot be read."""
    pass
