"""
Audit Logger

DESIGN DECISION: Every change to the corpus is logged.
This provides:
1. Traceability of every write to disk
2. Debugging capability when a month file goes bad
3. A visible record of failures that were surfaced to the user

The audit logger:
- Is synchronous, like the rest of lifelog
- Logs through structlog on top of stdlib logging
- Never sees diary text (see lifelog.models.audit)
"""

import logging
from typing import Any, Optional

import structlog

from lifelog.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output to stderr at the given stdlib level."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))
    logging.getLogger("lifelog").setLevel(level.upper())


class AuditLogger:
    """
    Central audit logging service.

    Each event is written to the structured local log at a level
    matching its severity.
    """

    def __init__(self, logger: Optional[Any] = None):
        """
        Initialize audit logger.

        Args:
            logger: structlog-style logger to write to.
                    If None, uses the "lifelog.audit" logger.
        """
        self._logger = logger or structlog.get_logger("lifelog.audit")

    def log(self, event: AuditEvent) -> AuditEvent:
        """Log an audit event and hand it back to the caller."""
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return event

    def log_month_log_created(self, month_year: str) -> None:
        """Log that a blank month log was built because no file exists."""
        self.log(AuditEventBuilder.month_log_created(month_year))

    def log_month_log_loaded(self, month_year: str, recorded: int) -> None:
        """Log a successful month file read."""
        self.log(AuditEventBuilder.month_log_loaded(month_year, recorded))

    def log_month_log_saved(self, month_year: str, path: str) -> None:
        """Log a month file write."""
        self.log(AuditEventBuilder.month_log_saved(month_year, path))

    def log_corrupt_data(self, month_year: str, error_message: str) -> None:
        """Log a month file that could not be decoded."""
        self.log(AuditEventBuilder.corrupt_data_detected(month_year, error_message))

    def log_entry_updated(self, month_year: str, day: int, rating: int) -> None:
        """Log an entry write."""
        self.log(AuditEventBuilder.entry_updated(month_year, day, rating))

    def log_entry_deleted(self, month_year: str, day: int) -> None:
        """Log an entry reset."""
        self.log(AuditEventBuilder.entry_deleted(month_year, day))

    def log_corpus_scanned(self, earliest: str, latest: str, years: int) -> None:
        """Log the browsable range found by a corpus scan."""
        self.log(AuditEventBuilder.corpus_scanned(earliest, latest, years))

    def log_corpus_scan_failed(self, error_type: str, error_message: str) -> None:
        """Log a failed corpus scan."""
        self.log(AuditEventBuilder.corpus_scan_failed(error_type, error_message))

    def log_empty_year_skipped(self, year: int) -> None:
        """Log a year directory that held no month files."""
        self.log(AuditEventBuilder.empty_year_skipped(year))

    def log_storage_error(
        self,
        operation: str,
        error_message: str,
        month_year: Optional[str] = None,
    ) -> None:
        """Log a read or write failure."""
        self.log(AuditEventBuilder.storage_error(operation, error_message, month_year))
