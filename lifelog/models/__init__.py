"""
Data Models Package

This package contains all Pydantic models used in lifelog.
All data read from or written to the corpus must conform to these schemas.
"""

from lifelog.models.month_log import (
    DayOutOfRangeError,
    Entry,
    EntryRecord,
    InvalidMonthNameError,
    InvalidYearError,
    LifelogError,
    Month,
    MonthLog,
    MonthLogError,
    MonthLogRecord,
    MonthYear,
    MoodStatistics,
    Rating,
    RecordedEntry,
    UnrecordedEntry,
)
from lifelog.models.validation import ValidationIssue, ValidationResult
from lifelog.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Month log models
    "Entry",
    "EntryRecord",
    "Month",
    "MonthLog",
    "MonthLogRecord",
    "MonthYear",
    "MoodStatistics",
    "Rating",
    "RecordedEntry",
    "UnrecordedEntry",
    # Errors
    "DayOutOfRangeError",
    "InvalidMonthNameError",
    "InvalidYearError",
    "LifelogError",
    "MonthLogError",
    # Validation models
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
