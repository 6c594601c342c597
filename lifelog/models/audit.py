"""
Audit Models for lifelog

Every change to the diary corpus, and every failure reading it, is logged
for audit purposes. This provides:
1. Traceability of what was written to disk and when
2. Debugging information when a month file turns out to be corrupt
3. A trail the user can check before trusting a restored corpus

DESIGN DECISION: Diary text never goes into an audit event.
Only the month-year key, the day number and the rating are recorded.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Every store and scanner operation that touches the disk has one.
    """
    # Month logs
    MONTH_LOG_CREATED = "month_log_created"
    MONTH_LOG_LOADED = "month_log_loaded"
    MONTH_LOG_SAVED = "month_log_saved"
    CORRUPT_DATA_DETECTED = "corrupt_data_detected"

    # Entries
    ENTRY_UPDATED = "entry_updated"
    ENTRY_DELETED = "entry_deleted"

    # Corpus
    CORPUS_SCANNED = "corpus_scanned"
    CORPUS_SCAN_FAILED = "corpus_scan_failed"
    EMPTY_YEAR_SKIPPED = "empty_year_skipped"

    # System events
    STORAGE_ERROR = "storage_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which month log or year is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'month_log', 'corpus')"
    )
    entity_key: Optional[str] = Field(
        default=None,
        description="Key of the entity, e.g. 'October/2023' or a year"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_key": self.entity_key,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.month_log_saved("October/2023", path)
        event = AuditEventBuilder.entry_updated("October/2023", day=5, rating=1)
    """

    @staticmethod
    def month_log_created(month_year: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MONTH_LOG_CREATED,
            severity=AuditSeverity.DEBUG,
            entity_type="month_log",
            entity_key=month_year,
            description=f"No month file for {month_year}, starting blank",
        )

    @staticmethod
    def month_log_loaded(month_year: str, recorded: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MONTH_LOG_LOADED,
            severity=AuditSeverity.DEBUG,
            entity_type="month_log",
            entity_key=month_year,
            description=f"Loaded {month_year}",
            details={
                "recorded_days": recorded,
            },
        )

    @staticmethod
    def month_log_saved(month_year: str, path: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MONTH_LOG_SAVED,
            entity_type="month_log",
            entity_key=month_year,
            description=f"Saved {month_year}",
            details={
                "path": path,
            },
        )

    @staticmethod
    def corrupt_data_detected(month_year: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CORRUPT_DATA_DETECTED,
            severity=AuditSeverity.ERROR,
            entity_type="month_log",
            entity_key=month_year,
            description=f"Month file for {month_year} could not be read",
            error_message=error_message,
        )

    @staticmethod
    def entry_updated(month_year: str, day: int, rating: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTRY_UPDATED,
            entity_type="month_log",
            entity_key=month_year,
            description=f"Entry for day {day} of {month_year} updated",
            details={
                "day": day,
                "rating": rating,
            },
        )

    @staticmethod
    def entry_deleted(month_year: str, day: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ENTRY_DELETED,
            entity_type="month_log",
            entity_key=month_year,
            description=f"Entry for day {day} of {month_year} reset",
            details={
                "day": day,
            },
        )

    @staticmethod
    def corpus_scanned(earliest: str, latest: str, years: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CORPUS_SCANNED,
            severity=AuditSeverity.DEBUG,
            entity_type="corpus",
            description=f"Browsable range {earliest} .. {latest}",
            details={
                "earliest": earliest,
                "latest": latest,
                "years_found": years,
            },
        )

    @staticmethod
    def corpus_scan_failed(error_type: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CORPUS_SCAN_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="corpus",
            description=f"Corpus scan failed: {error_type}",
            error_message=error_message,
        )

    @staticmethod
    def empty_year_skipped(year: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EMPTY_YEAR_SKIPPED,
            severity=AuditSeverity.WARNING,
            entity_type="corpus",
            entity_key=str(year),
            description=f"Year directory {year} holds no month files",
        )

    @staticmethod
    def storage_error(
        operation: str,
        error_message: str,
        month_year: Optional[str] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            entity_type="month_log" if month_year else None,
            entity_key=month_year,
            description=f"Storage error during {operation}",
            error_message=error_message,
            details={
                "operation": operation,
            },
        )
