"""
JSON File Storage Implementation

DESIGN DECISION: Each month log is one JSON file, grouped by year:

    lifelog
    ├── 2022
    │   ├── January.json
    │   ├── February.json
    │   └── ...
    └── 2023
        ├── January.json
        └── ...

TRADEOFFS:
- One file per month keeps writes small and files easy to inspect by hand
- A save rewrites the whole month (fine for at most 31 entries)
- No locking; a single process is assumed to own the corpus

A year directory is created by the first write into that year, never by a
read, so a year directory normally always holds at least one month file.
"""

from pathlib import Path
from typing import Optional

from lifelog.config import MONTH_FILE_EXTENSION
from lifelog.models.month_log import (
    InvalidMonthNameError,
    InvalidYearError,
    Month,
    MonthLog,
    MonthLogRecord,
    MonthYear,
    parse_year,
)
from lifelog.services.storage.interface import (
    CorruptCorpusError,
    CorruptDataError,
    EmptyCorpusError,
    MonthLogStorageInterface,
    StorageError,
)
from lifelog.validation import MonthLogValidator


class JsonMonthLogStorage(MonthLogStorageInterface):
    """
    Month logs stored as ``<root>/<year>/<Month>.json``.

    The root itself is not created here; see create_app_components.
    """

    def __init__(
        self,
        root: Path,
        validator: Optional[MonthLogValidator] = None,
    ):
        self._root = Path(root)
        self._validator = validator or MonthLogValidator()

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: MonthYear) -> Path:
        return self._root / str(key.year) / f"{key.month.value}.{MONTH_FILE_EXTENSION}"

    def read(self, key: MonthYear) -> Optional[MonthLog]:
        """Read and validate the month file for a key."""
        path = self.path_for(key)
        if not path.is_file():
            return None

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}")

        result, log = self._validator.validate(raw, key)
        if log is None:
            raise CorruptDataError(
                f"Month file {path} is corrupt: {result.summary()}",
                path=path,
            )
        return log

    def write(self, log: MonthLog) -> Path:
        """Serialize a month log, creating its year directory if needed."""
        path = self.path_for(log.key)
        data = MonthLogRecord.from_month_log(log).model_dump_json()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}")
        return path

    def list_years(self) -> list[int]:
        """Parse every directory under the root as a year."""
        try:
            children = list(self._root.iterdir())
        except OSError as e:
            raise EmptyCorpusError(f"Cannot read data directory {self._root}: {e}")

        years = []
        for child in children:
            if not child.is_dir():
                continue
            try:
                year = parse_year(child.name)
            except InvalidYearError:
                year = None
            # must round-trip so path_for finds the same directory
            if year is None or str(year) != child.name:
                raise CorruptCorpusError(
                    f"Directory {child} in the data directory is not a year"
                )
            years.append(year)
        return sorted(years)

    def list_months(self, year: int) -> list[Month]:
        """Map every month file of a year to its Month; other files are ignored."""
        year_dir = self._root / str(year)
        try:
            children = list(year_dir.iterdir())
        except OSError as e:
            raise StorageError(f"Cannot read year directory {year_dir}: {e}")

        months = []
        for child in children:
            if not child.is_file() or child.suffix != f".{MONTH_FILE_EXTENSION}":
                continue
            try:
                months.append(Month.from_name(child.stem))
            except InvalidMonthNameError:
                raise CorruptCorpusError(
                    f"File {child} is not named after a month"
                )
        return sorted(months)
