"""
Two-Stage Validation of Month Files

DESIGN DECISION: A month file read from disk is validated in two stages:

STAGE 1 - SCHEMA VALIDATION:
- Valid JSON
- month / year / entries present with the right types
- Every entry has an integer rating and a string text

STAGE 2 - SEMANTIC VALIDATION:
- Month and year agree with where the file lives
- One entry per calendar day
- Ratings outside -2..2 are reported as warnings only; the store accepts them
- Only the exact sentinel pair is an unrecorded day; a sentinel rating
  paired with real text is a recorded entry with an out-of-range rating

WHY TWO STAGES:
1. A file that is not even a month log gets a clear "malformed" report
2. A well-formed file in the wrong place gets a "mismatch" report
3. Stage 2 needs the decoded record

IMPORTANT: Validation NEVER silently fixes issues.
Errors stop the read; the caller decides what to tell the user.
"""

from typing import Optional, Union

from pydantic import ValidationError

from lifelog.models.month_log import (
    SENTINEL_RATING,
    SENTINEL_TEXT,
    MonthLog,
    MonthLogRecord,
    MonthYear,
    Rating,
)
from lifelog.models.validation import ValidationIssue, ValidationResult


_VALID_RATINGS = {rating.value for rating in Rating}


class MonthLogValidator:
    """
    Validates the raw contents of one month file.

    Stage 1: Schema validation
    Stage 2: Semantic validation against the expected month-year key
    """

    def _validate_schema(
        self,
        raw: Union[str, bytes],
    ) -> tuple[Optional[MonthLogRecord], list[ValidationIssue]]:
        """
        Stage 1: Schema validation.

        Returns: (record_or_None, list_of_issues)
        """
        try:
            return MonthLogRecord.model_validate_json(raw), []
        except ValidationError as e:
            issues = []
            for error in e.errors():
                location = ".".join(str(part) for part in error["loc"]) or "<root>"
                issues.append(ValidationIssue(
                    field=location,
                    issue_type="malformed",
                    message=f"{location}: {error['msg']}",
                    severity="error",
                ))
            return None, issues

    def _validate_semantics(
        self,
        record: MonthLogRecord,
        expected: MonthYear,
    ) -> list[ValidationIssue]:
        """
        Stage 2: Semantic validation.

        Checks:
        - Key matches the file location
        - Entry count matches the calendar
        - Rating values
        """
        issues = []

        if record.month != expected.month.value:
            issues.append(ValidationIssue(
                field="month",
                issue_type="mismatch",
                message=f"File for {expected} says month is {record.month!r}",
                severity="error",
            ))

        if record.year != expected.year:
            issues.append(ValidationIssue(
                field="year",
                issue_type="mismatch",
                message=f"File for {expected} says year is {record.year}",
                severity="error",
            ))

        if len(record.entries) != expected.days:
            issues.append(ValidationIssue(
                field="entries",
                issue_type="wrong_length",
                message=(
                    f"{expected} has {expected.days} days but the file "
                    f"holds {len(record.entries)} entries"
                ),
                severity="error",
            ))

        for index, entry in enumerate(record.entries):
            if entry.rating == SENTINEL_RATING and entry.text == SENTINEL_TEXT:
                continue
            if entry.rating not in _VALID_RATINGS:
                issues.append(ValidationIssue(
                    field=f"entries.{index}.rating",
                    issue_type="suspicious_value",
                    message=f"Day {index + 1} has rating {entry.rating} outside -2..2",
                    severity="warning",
                ))

        return issues

    def validate(
        self,
        raw: Union[str, bytes],
        expected: MonthYear,
    ) -> tuple[ValidationResult, Optional[MonthLog]]:
        """
        Run both stages.

        Returns the result and, when there are no errors, the decoded MonthLog.
        Stage 2 is skipped if stage 1 fails.
        """
        record, issues = self._validate_schema(raw)
        if record is None:
            return ValidationResult(
                month_year=str(expected),
                schema_valid=False,
                semantic_valid=False,
                issues=issues,
            ), None

        issues = self._validate_semantics(record, expected)
        result = ValidationResult(
            month_year=str(expected),
            schema_valid=True,
            semantic_valid=not any(issue.severity == "error" for issue in issues),
            issues=issues,
        )
        if not result.is_valid:
            return result, None

        return result, record.to_month_log()
