"""Corpus scanning package."""

from lifelog.corpus.scanner import DateRange, DateRangeScanner, month_number

__all__ = ["DateRange", "DateRangeScanner", "month_number"]
