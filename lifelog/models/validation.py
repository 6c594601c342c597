"""Validation result models for month files read from disk."""

from typing import Optional

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue, e.g. 'entries[3].rating'"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'malformed', 'mismatch', 'suspicious_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """
    Result of the two-stage validation of one month file.

    Stage 1: Schema validation (JSON shape, field types)
    Stage 2: Semantic validation (matches its location, day count, ratings)
    """

    month_year: str = Field(
        ...,
        description="Key of the month file being validated"
    )
    schema_valid: bool
    semantic_valid: bool
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.schema_valid and self.semantic_valid

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]

    def summary(self) -> Optional[str]:
        """One line listing the error messages, or None if there are none."""
        errors = [issue.message for issue in self.issues if issue.severity == "error"]
        if not errors:
            return None
        return "; ".join(errors)
