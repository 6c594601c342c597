"""
Date-Range Scanner

Works out which dates a calendar picker should allow, from what is
stored in the corpus.

For a corpus like:

    lifelog
    ├── 2022
    │   ├── January.json
    │   └── March.json
    └── 2023
        └── October.json

the earliest date is 2022-01-01. The latest date depends on the
LatestDatePolicy: the last day of the current real-world month
(CURRENT_MONTH, the default, so today is always selectable), or
2023-10-31 (STORED_DATA).

On an empty corpus both ends fall back to the first day of the current
month, except that CURRENT_MONTH still reaches the end of the month.
Under CURRENT_MONTH the earliest date is never later than the first day
of the current month.
"""

from datetime import date
from typing import Callable, NamedTuple, Optional

from lifelog.audit import AuditLogger
from lifelog.config import LatestDatePolicy
from lifelog.models.month_log import Month, MonthYear
from lifelog.services.storage import MonthLogStorageInterface, StorageError


class DateRange(NamedTuple):
    """Inclusive range of browsable dates."""
    earliest: date
    latest: date

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.earliest <= day <= self.latest


def month_number(name: str) -> int:
    """Map a month name such as ``"March"`` to its number (3)."""
    return Month.from_name(name).number


class DateRangeScanner:
    """
    Scans the corpus for the first and last stored months.

    Hard failures (a directory that is not a year, an unreadable root)
    propagate to the caller. A year directory with no month files is
    skipped with a warning.
    """

    def __init__(
        self,
        storage: MonthLogStorageInterface,
        policy: LatestDatePolicy = LatestDatePolicy.CURRENT_MONTH,
        audit_logger: Optional[AuditLogger] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self._storage = storage
        self._policy = policy
        self._audit_logger = audit_logger or AuditLogger()
        self._today = today or date.today

    @property
    def policy(self) -> LatestDatePolicy:
        return self._policy

    def _stored_months(self) -> list[MonthYear]:
        """Every stored (month, year) in calendar order."""
        stored = []
        for year in self._storage.list_years():
            months = self._storage.list_months(year)
            if not months:
                self._audit_logger.log_empty_year_skipped(year)
                continue
            stored.extend(MonthYear(month, year) for month in months)
        return stored

    def earliest_latest(self) -> DateRange:
        """
        Return the earliest and latest browsable dates.

        Raises:
            EmptyCorpusError: If the corpus root is missing or unreadable
            CorruptCorpusError: If the corpus holds unrecognized names
        """
        current = MonthYear.from_date(self._today())

        try:
            stored = self._stored_months()
        except StorageError as e:
            self._audit_logger.log_corpus_scan_failed(type(e).__name__, str(e))
            raise

        # list_years and list_months are both sorted
        if stored:
            earliest = stored[0].first_day
            newest = stored[-1].last_day
        else:
            earliest = current.first_day
            newest = current.first_day

        if self._policy == LatestDatePolicy.CURRENT_MONTH:
            # A corpus holding only future months must not push today out
            earliest = min(earliest, current.first_day)
            latest = current.last_day
        else:
            latest = newest

        self._audit_logger.log_corpus_scanned(
            earliest.isoformat(),
            latest.isoformat(),
            len({key.year for key in stored}),
        )
        return DateRange(earliest, latest)
