"""
MonthLog Store

The read/write API the presentation layer uses for diary data:
load a month, look up a day, write or reset a day, save, and count ratings.

DESIGN DECISION: The store keeps no month log between calls.
Every operation takes the key or the MonthLog it works on, so callers own
their state and two callers never share a hidden cached instance.

Ratings are not range-checked here. The presentation layer offers only
the five Rating values; anything else it passes is stored as given.
"""

from datetime import date
from typing import Callable, Optional, Union

from lifelog.audit import AuditLogger
from lifelog.models.month_log import (
    Month,
    MonthLog,
    MonthYear,
    MoodStatistics,
    RecordedEntry,
    UnrecordedEntry,
    coerce_key,
    coerce_month,
    parse_year,
)
from lifelog.services.storage import (
    CorruptDataError,
    MonthLogStorageInterface,
    StorageError,
)


class MonthLogStore:
    """
    Stateless service over a month log storage backend.

    GUARANTEES:
    - A month log always has one entry per calendar day
    - Loading never writes to disk
    - A corrupt month file is reported, never replaced
    """

    def __init__(
        self,
        storage: MonthLogStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Initialize the store.

        Args:
            storage: Where month logs are read from and written to.
            audit_logger: Receives an event for every load, write and failure.
            today: Clock used by current() and the today helpers,
                   read at call time. Defaults to date.today.
        """
        self._storage = storage
        self._audit_logger = audit_logger or AuditLogger()
        self._today = today or date.today

    def new_month_log(self, month: Union[Month, str], year: Union[int, str]) -> MonthLog:
        """Build a month log with every day unrecorded."""
        return MonthLog.blank(coerce_month(month), parse_year(year))

    def load(self, month_year: Union[MonthYear, str]) -> MonthLog:
        """
        Return the month log for a key such as ``"October/2023"``.

        If no month file exists, a blank month log is returned; nothing is
        created on disk until save().
        """
        key = coerce_key(month_year)
        try:
            log = self._storage.read(key)
        except CorruptDataError as e:
            self._audit_logger.log_corrupt_data(str(key), str(e))
            raise
        except StorageError as e:
            self._audit_logger.log_storage_error("load", str(e), str(key))
            raise

        if log is None:
            self._audit_logger.log_month_log_created(str(key))
            return self.new_month_log(key.month, key.year)

        self._audit_logger.log_month_log_loaded(
            str(key), log.statistics().recorded
        )
        return log

    def current(self) -> MonthLog:
        """Return the month log for the current calendar month."""
        return self.load(MonthYear.from_date(self._today()))

    def get_entry(self, log: MonthLog, day: int) -> Union[RecordedEntry, UnrecordedEntry]:
        """Return the entry for a 1-indexed day."""
        return log.get_entry(day)

    def get_todays_entry(self, log: MonthLog) -> Union[RecordedEntry, UnrecordedEntry]:
        return self.get_entry(log, self._today().day)

    def update_entry(self, log: MonthLog, day: int, rating: int, text: str) -> None:
        """Replace the entry for a day with a recorded one."""
        log.set_entry(day, rating, text)
        self._audit_logger.log_entry_updated(log.month_year, day, rating)

    def update_todays_entry(self, log: MonthLog, rating: int, text: str) -> None:
        self.update_entry(log, self._today().day, rating, text)

    def delete_entry(self, log: MonthLog, day: int) -> None:
        """Reset the entry for a day to unrecorded. The slot stays."""
        log.reset_entry(day)
        self._audit_logger.log_entry_deleted(log.month_year, day)

    def save(self, log: MonthLog) -> None:
        """Write the month log to its canonical file, replacing any old one."""
        try:
            path = self._storage.write(log)
        except StorageError as e:
            self._audit_logger.log_storage_error("save", str(e), log.month_year)
            raise
        self._audit_logger.log_month_log_saved(log.month_year, str(path))

    def statistics(self, log: MonthLog) -> MoodStatistics:
        """Count the month's entries by rating, plus unrecorded days."""
        return log.statistics()
