"""
Validation Module for series input

Provides row-level validation of series CSV data. Invalid rows are logged and
counted instead of aborting the load, so one bad line never hides a whole
series.

Usage:
    from validation import (
        validate_series_row,
        is_empty_value,
        ValidationResult,
        ValidationStats,
    )
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationIssue:
    """Represents a single validation issue."""
    field_name: str
    issue_type: str
    message: str
    severity: ValidationSeverity = ValidationSeverity.WARNING
    line_number: Optional[int] = None

    def __str__(self) -> str:
        location = f"[line {self.line_number}] " if self.line_number is not None else ""
        return f"{location}{self.field_name}: {self.message}"


@dataclass
class ValidationResult:
    """Result of validating a single row."""
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    skipped: bool = False
    skip_reason: Optional[str] = None

    def add_issue(self, issue: ValidationIssue) -> None:
        self.issues.append(issue)

    def has_errors(self) -> bool:
        return any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    def has_warnings(self) -> bool:
        return any(i.severity == ValidationSeverity.WARNING for i in self.issues)


@dataclass
class ValidationStats:
    """Statistics for a series load."""
    total_rows: int = 0
    valid_rows: int = 0
    skipped_rows: int = 0
    rows_with_warnings: int = 0
    duplicate_rows: int = 0
    issues_by_field: Dict[str, int] = field(default_factory=dict)
    skipped_by_reason: Dict[str, int] = field(default_factory=dict)

    def record_result(self, result: ValidationResult) -> None:
        """Record a validation result in the statistics."""
        self.total_rows += 1

        if result.skipped:
            self.skipped_rows += 1
            if result.skip_reason:
                self.skipped_by_reason[result.skip_reason] = \
                    self.skipped_by_reason.get(result.skip_reason, 0) + 1
        elif result.is_valid:
            self.valid_rows += 1

        if result.has_warnings():
            self.rows_with_warnings += 1

        for issue in result.issues:
            self.issues_by_field[issue.field_name] = \
                self.issues_by_field.get(issue.field_name, 0) + 1

    def log_summary(self, source: str = "series") -> None:
        """Log a one-line summary, at WARNING level if anything was skipped."""
        level = logging.WARNING if self.skipped_rows or self.duplicate_rows else logging.INFO
        logger.log(
            level,
            f"Validation summary for {source}: {self.valid_rows}/{self.total_rows} rows valid, "
            f"{self.skipped_rows} skipped, {self.duplicate_rows} duplicates replaced"
            + (f" (skipped by reason: {self.skipped_by_reason})" if self.skipped_by_reason else "")
        )


def is_empty_value(value: Any) -> bool:
    """Check for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_numeric(value: Any) -> Optional[float]:
    """Parse a numeric cell; thousands separators are tolerated. None if not numeric."""
    if is_empty_value(value):
        return None
    try:
        return float(str(value).strip().replace(",", ""))
    except ValueError:
        return None


def validate_series_row(
    row: Dict[str, Any],
    timestamp_field: str,
    line_number: Optional[int] = None,
    log_issues: bool = True,
) -> ValidationResult:
    """Validate one CSV row of a series.

    A row is skipped when its timestamp is missing. Empty or non-numeric
    value cells produce warnings; the caller drops those cells.

    Args:
        row: Row as read by csv.DictReader.
        timestamp_field: Name of the timestamp column.
        line_number: Data line number, for messages.
        log_issues: Log each issue at debug level.

    Returns:
        ValidationResult for the row.
    """
    result = ValidationResult(is_valid=True)

    if is_empty_value(row.get(timestamp_field)):
        result.is_valid = False
        result.skipped = True
        result.skip_reason = "missing_timestamp"
        result.add_issue(ValidationIssue(
            field_name=timestamp_field,
            issue_type="missing",
            message="Timestamp is empty",
            severity=ValidationSeverity.ERROR,
            line_number=line_number,
        ))
    else:
        for name, value in row.items():
            if name == timestamp_field or name is None:
                continue
            if parse_numeric(value) is None:
                result.add_issue(ValidationIssue(
                    field_name=name,
                    issue_type="empty" if is_empty_value(value) else "non_numeric",
                    message=f"Value {value!r} is not numeric; dropped",
                    line_number=line_number,
                ))

    if log_issues:
        for issue in result.issues:
            logger.debug(str(issue))

    return result
