"""
Main Orchestrator for lifelog

This module ties the components together and defines the flows a
presentation layer (terminal menus, dialogs, a calendar widget) drives:
1. New entry for today (check for an existing entry → write → save)
2. Browsing (calendar bounds → open a day → edit or erase → save)
3. Monthly statistics

DESIGN DECISION: The presentation layer holds one JournalSession and calls
only its methods. It never touches files, and it never keeps a MonthLog
across callbacks; every flow loads, changes and saves within one call.
"""

from datetime import date
from typing import Callable, Optional, Union

from lifelog.audit import AuditLogger, configure_logging
from lifelog.config import LifelogSettings, get_settings
from lifelog.corpus import DateRange, DateRangeScanner
from lifelog.models.month_log import (
    LifelogError,
    MonthLog,
    MonthYear,
    MoodStatistics,
    RecordedEntry,
    UnrecordedEntry,
)
from lifelog.services.storage import JsonMonthLogStorage, StorageError
from lifelog.store import MonthLogStore


class EntryAlreadyExistsError(LifelogError):
    """Today already has an entry; editing goes through record()."""
    pass


class JournalSession:
    """
    Session object owned by the presentation layer.

    Flow for a new entry:
    1. has_entry_for_today() → if True, tell the user and stop
    2. Ask for text, then a Rating
    3. record_today(rating, text) → loads, writes and saves this month
    """

    def __init__(
        self,
        store: MonthLogStore,
        scanner: DateRangeScanner,
        today: Optional[Callable[[], date]] = None,
    ):
        self._store = store
        self._scanner = scanner
        self._today = today or date.today

    def calendar_bounds(self) -> DateRange:
        """Earliest and latest dates the calendar picker should allow."""
        return self._scanner.earliest_latest()

    def open_month(self, month_year: Union[MonthYear, str]) -> MonthLog:
        return self._store.load(month_year)

    def open_day(self, day: date) -> Union[RecordedEntry, UnrecordedEntry]:
        """Entry for a date picked in the calendar."""
        log = self._store.load(MonthYear.from_date(day))
        return self._store.get_entry(log, day.day)

    def todays_entry(self) -> Union[RecordedEntry, UnrecordedEntry]:
        return self._store.get_todays_entry(self._store.current())

    def has_entry_for_today(self) -> bool:
        return not self.todays_entry().is_default

    def record_today(self, rating: int, text: str) -> MonthLog:
        """
        Write today's entry and save the month.

        Raises EntryAlreadyExistsError if today already has one, so a
        second "new entry" never overwrites the first.
        """
        log = self._store.current()
        if not self._store.get_todays_entry(log).is_default:
            raise EntryAlreadyExistsError(
                f"There is already an entry for {self._today().isoformat()}"
            )
        self._store.update_todays_entry(log, rating, text)
        self._store.save(log)
        return log

    def record(self, day: date, rating: int, text: str) -> MonthLog:
        """Write or overwrite the entry for any date and save its month."""
        log = self._store.load(MonthYear.from_date(day))
        self._store.update_entry(log, day.day, rating, text)
        self._store.save(log)
        return log

    def erase(self, day: date) -> MonthLog:
        """Reset the entry for a date to unrecorded and save its month."""
        log = self._store.load(MonthYear.from_date(day))
        self._store.delete_entry(log, day.day)
        self._store.save(log)
        return log

    def month_statistics(self, month_year: Union[MonthYear, str]) -> MoodStatistics:
        return self._store.statistics(self._store.load(month_year))


def create_app_components(
    settings: Optional[LifelogSettings] = None,
    today: Optional[Callable[[], date]] = None,
) -> JournalSession:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to use. Defaults to the cached process settings.
        today: Clock override, mainly for tests.

    Returns:
        A JournalSession over the configured data directory.

    Raises:
        StorageError: If the data directory cannot be created.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    data_dir = settings.resolved_data_dir
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create data directory {data_dir}: {e}")

    audit_logger = AuditLogger()
    storage = JsonMonthLogStorage(data_dir)

    store = MonthLogStore(
        storage=storage,
        audit_logger=audit_logger,
        today=today,
    )
    scanner = DateRangeScanner(
        storage=storage,
        policy=settings.latest_date_policy,
        audit_logger=audit_logger,
        today=today,
    )

    return JournalSession(store, scanner, today=today)
