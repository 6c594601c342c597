"""Validation package."""

from lifelog.validation.validator import MonthLogValidator

__all__ = ["MonthLogValidator"]
