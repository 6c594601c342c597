"""Audit logging package."""

from lifelog.audit.logger import AuditLogger, configure_logging

__all__ = ["AuditLogger", "configure_logging"]
