"""
Core Data Models for lifelog

These models define the diary data held for one calendar month.
They are designed to:
1. Make the recorded/unrecorded distinction explicit in the type
2. Keep the number of entries tied to the calendar
3. Be serializable to the on-disk month file
4. Stay independent of any storage backend

DESIGN DECISION: An entry is a tagged variant (RecordedEntry | UnrecordedEntry).
The legacy sentinel rating only exists in the file format (see MonthLogRecord),
never in memory.
"""

import calendar
from datetime import date
from enum import Enum, IntEnum
from typing import Annotated, Literal, NamedTuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


# =============================================================================
# ERRORS
# =============================================================================

class LifelogError(Exception):
    """Base exception for everything raised by lifelog."""
    pass


class MonthLogError(LifelogError):
    """Base exception for month log model errors."""
    pass


class InvalidMonthNameError(MonthLogError, ValueError):
    """Month name is not one of the twelve capitalized English names."""
    pass


class InvalidYearError(MonthLogError, ValueError):
    """Year is not a positive four-digit-range integer."""
    pass


class DayOutOfRangeError(MonthLogError, IndexError):
    """Day index is outside the month."""
    pass


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class Month(str, Enum):
    """
    Calendar months.

    The value is the capitalized English name, which is also the month file
    name on disk (e.g. ``October.json``). Ordering follows the month number.
    """
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"

    @property
    def number(self) -> int:
        """Month number, 1 for January through 12 for December."""
        return _MONTH_ORDER.index(self) + 1

    def days_in(self, year: int) -> int:
        """Number of days in this month for the given year (Gregorian)."""
        return calendar.monthrange(year, self.number)[1]

    @classmethod
    def from_name(cls, name: str) -> "Month":
        """Look up a month by its exact capitalized name."""
        try:
            return cls(name)
        except ValueError:
            raise InvalidMonthNameError(f"Unrecognized month name: {name!r}")

    @classmethod
    def from_number(cls, number: int) -> "Month":
        if not 1 <= number <= 12:
            raise InvalidMonthNameError(f"Month number out of range: {number}")
        return _MONTH_ORDER[number - 1]

    def __lt__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        return self.number < other.number

    def __le__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        return self.number <= other.number

    def __gt__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        return self.number > other.number

    def __ge__(self, other):
        if not isinstance(other, Month):
            return NotImplemented
        return self.number >= other.number


_MONTH_ORDER = list(Month)


class Rating(IntEnum):
    """
    How the day went, on a five point scale.

    The store accepts any integer rating; these are the values a
    presentation layer should offer.
    """
    AWESOME = 2
    GOOD = 1
    OKAY = 0
    BAD = -1
    HORRIBLE = -2

    @property
    def label(self) -> str:
        return _RATING_LABELS[self]


_RATING_LABELS = {
    Rating.AWESOME: "+2 (awesome)",
    Rating.GOOD: "+1",
    Rating.OKAY: " 0 (okay)",
    Rating.BAD: "-1",
    Rating.HORRIBLE: "-2 (horrible)",
}


# =============================================================================
# MONTH-YEAR KEY
# =============================================================================

MIN_YEAR = 1
MAX_YEAR = 9999


def parse_year(year: Union[int, str]) -> int:
    """Parse a year given as int or string, raising InvalidYearError."""
    if isinstance(year, bool):
        raise InvalidYearError(f"Invalid year: {year!r}")
    if isinstance(year, str):
        try:
            year = int(year.strip())
        except ValueError:
            raise InvalidYearError(f"Invalid year: {year!r}")
    if not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(f"Invalid year: {year!r}")
    return year


class MonthYear(NamedTuple):
    """
    Identifies one month log, e.g. ``MonthYear(Month.OCTOBER, 2023)``.

    The string form ``"October/2023"`` is the month-year key passed
    around by the presentation layer.
    """
    month: Month
    year: int

    @classmethod
    def parse(cls, key: str) -> "MonthYear":
        """Parse a ``"<MonthName>/<year>"`` key."""
        month_name, sep, year = key.partition("/")
        if not sep:
            raise InvalidMonthNameError(f"Malformed month-year key: {key!r}")
        return cls(Month.from_name(month_name), parse_year(year))

    @classmethod
    def from_date(cls, day: date) -> "MonthYear":
        return cls(Month.from_number(day.month), day.year)

    @property
    def days(self) -> int:
        return self.month.days_in(self.year)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month.number, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month.number, self.days)

    def __str__(self) -> str:
        return f"{self.month.value}/{self.year}"


# =============================================================================
# ENTRIES
# =============================================================================

EMPTY_ENTRY_ART = r"""
        wow, such empty
                         ,
  ,-.       _,---._ __  / \
 /  )    .-'       `./ /   \
(  (   ,'            `/    /|
 \  `-"             \'\   / |
  `.              ,  \ \ /  |
   /`.          ,'-`----Y   |
  (            ;        |   '
  |  ,-.    ,-'         |  /
  |  | (   |            | /
  )  |  \  `.___________|/
  `--'   `--'
"""


class UnrecordedEntry(BaseModel):
    """A day with nothing written yet. Also what a deleted entry becomes."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecorded"] = "unrecorded"

    @property
    def is_default(self) -> bool:
        return True

    def render(self) -> str:
        return EMPTY_ENTRY_ART


class RecordedEntry(BaseModel):
    """
    A day the user has written about.

    The rating is not range-checked here; see Rating for the values
    a presentation layer is expected to offer.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["recorded"] = "recorded"
    rating: int = Field(
        ...,
        description="Day rating, normally one of -2..2"
    )
    text: str = Field(
        ...,
        description="Free-form diary text"
    )

    @property
    def is_default(self) -> bool:
        return False

    def render(self) -> str:
        return f"rating: {self.rating}\n\n{self.text}"


Entry = Annotated[
    Union[RecordedEntry, UnrecordedEntry],
    Field(discriminator="kind"),
]


# =============================================================================
# STATISTICS
# =============================================================================

class MoodStatistics(BaseModel):
    """How many days of a month were rated what."""

    awesome: int = Field(default=0, ge=0, description="Days rated +2")
    good: int = Field(default=0, ge=0, description="Days rated +1")
    okay: int = Field(default=0, ge=0, description="Days rated 0")
    bad: int = Field(default=0, ge=0, description="Days rated -1")
    horrible: int = Field(default=0, ge=0, description="Days rated -2")
    unrecorded: int = Field(default=0, ge=0, description="Days with no entry")

    def by_rating(self) -> dict[int, int]:
        """The five rating buckets keyed by rating value."""
        return {
            2: self.awesome,
            1: self.good,
            0: self.okay,
            -1: self.bad,
            -2: self.horrible,
        }

    @property
    def recorded(self) -> int:
        return sum(self.by_rating().values())

    def render(self) -> str:
        return (
            f"+2 (awesome) - {self.awesome}\n"
            f"+1 - {self.good}\n"
            f"0 (okay) - {self.okay}\n"
            f"-1 - {self.bad}\n"
            f"-2 (horrible) - {self.horrible}\n\n"
            f"no data - {self.unrecorded}"
        )


_BUCKETS = {
    2: "awesome",
    1: "good",
    0: "okay",
    -1: "bad",
    -2: "horrible",
}


# =============================================================================
# MONTH LOG
# =============================================================================

class MonthLog(BaseModel):
    """
    All diary entries for one calendar month.

    CRITICAL: ``entries`` always holds exactly one slot per calendar day.
    Entries are replaced or reset in place, never removed.
    """

    month: Month
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    entries: list[Entry]

    @model_validator(mode='after')
    def validate_entry_count(self) -> 'MonthLog':
        """Entry count must match the number of days in the month."""
        expected = self.month.days_in(self.year)
        if len(self.entries) != expected:
            raise ValueError(
                f"{self.month.value} {self.year} has {expected} days "
                f"but {len(self.entries)} entries were given"
            )
        return self

    @classmethod
    def blank(cls, month: Month, year: int) -> "MonthLog":
        """A month log with every day unrecorded."""
        return cls(
            month=month,
            year=year,
            entries=[UnrecordedEntry() for _ in range(month.days_in(year))],
        )

    @property
    def key(self) -> MonthYear:
        return MonthYear(self.month, self.year)

    @property
    def month_year(self) -> str:
        """The month-year key string, e.g. ``"August/2022"``."""
        return str(self.key)

    def _check_day(self, day: int) -> int:
        if not 1 <= day <= len(self.entries):
            raise DayOutOfRangeError(
                f"Day {day} is outside {self.month_year} "
                f"(1..{len(self.entries)})"
            )
        return day - 1

    def get_entry(self, day: int) -> Union[RecordedEntry, UnrecordedEntry]:
        return self.entries[self._check_day(day)]

    def set_entry(self, day: int, rating: int, text: str) -> RecordedEntry:
        entry = RecordedEntry(rating=rating, text=text)
        self.entries[self._check_day(day)] = entry
        return entry

    def reset_entry(self, day: int) -> None:
        self.entries[self._check_day(day)] = UnrecordedEntry()

    def statistics(self) -> MoodStatistics:
        counts = {name: 0 for name in _BUCKETS.values()}
        unrecorded = 0
        for entry in self.entries:
            if isinstance(entry, UnrecordedEntry):
                unrecorded += 1
            elif entry.rating in _BUCKETS:
                counts[_BUCKETS[entry.rating]] += 1
        return MoodStatistics(unrecorded=unrecorded, **counts)


# =============================================================================
# FILE FORMAT
# =============================================================================

SENTINEL_RATING = 42
SENTINEL_TEXT = "wow, such empty"


class EntryRecord(BaseModel):
    """One entry as written to the month file."""
    model_config = ConfigDict(extra="ignore")

    rating: int
    text: str

    @classmethod
    def from_entry(cls, entry: Union[RecordedEntry, UnrecordedEntry]) -> "EntryRecord":
        if isinstance(entry, RecordedEntry):
            return cls(rating=entry.rating, text=entry.text)
        return cls(rating=SENTINEL_RATING, text=SENTINEL_TEXT)

    def to_entry(self) -> Union[RecordedEntry, UnrecordedEntry]:
        # Only the exact sentinel pair marks an empty day; a real rating
        # of 42 with other text is a recorded entry.
        if self.rating == SENTINEL_RATING and self.text == SENTINEL_TEXT:
            return UnrecordedEntry()
        return RecordedEntry(rating=self.rating, text=self.text)


class MonthLogRecord(BaseModel):
    """
    A month log as written to ``<data_dir>/<year>/<Month>.json``.

    DESIGN DECISION: The field layout is frozen so files written by any
    version stay readable. New fields must be optional; unknown fields
    are ignored on read.
    """
    model_config = ConfigDict(extra="ignore")

    month: str
    year: int = Field(..., ge=0)
    entries: list[EntryRecord]

    @classmethod
    def from_month_log(cls, log: MonthLog) -> "MonthLogRecord":
        return cls(
            month=log.month.value,
            year=log.year,
            entries=[EntryRecord.from_entry(entry) for entry in log.entries],
        )

    def to_month_log(self) -> MonthLog:
        """
        Build the in-memory MonthLog.

        Raises InvalidMonthNameError / InvalidYearError for a bad key and
        pydantic's ValidationError for a wrong entry count.
        """
        return MonthLog(
            month=Month.from_name(self.month),
            year=parse_year(self.year),
            entries=[record.to_entry() for record in self.entries],
        )


def coerce_month(month: Union[Month, str]) -> Month:
    """Accept a Month or its name."""
    if isinstance(month, Month):
        return month
    if isinstance(month, str):
        return Month.from_name(month)
    raise InvalidMonthNameError(f"Unrecognized month: {month!r}")


def coerce_key(key: Union[MonthYear, str]) -> MonthYear:
    """Accept a MonthYear or a ``"<MonthName>/<year>"`` string."""
    if isinstance(key, MonthYear):
        return MonthYear(coerce_month(key.month), parse_year(key.year))
    return MonthYear.parse(key)

