"""
Series Loader Module

Loads a time series from a CSV file and hands it over as a validated
TimeSeries. This is the data-source side of the filter: it orders and
deduplicates the rows so the windowing core can rely on an ascending series.

Expected layout (the timestamp column name is configurable):

    timestamp,revenue,target
    2025-03-01,52000,50000
    2025-04-01,58000,55000

Usage:
    from series_loader import load_series

    series = load_series("revenue.csv")
"""

import csv
import logging
import os
from datetime import date
from typing import Dict, Optional

import settings
from date_utilities import parse_date
from performance_timing import timed_operation
from series_windower import TimeSeries, TimeSeriesPoint
from validation import (
    ValidationIssue,
    ValidationSeverity,
    ValidationStats,
    parse_numeric,
    validate_series_row,
)

logger = logging.getLogger(__name__)


def load_series(
    file_path: str,
    timestamp_field: Optional[str] = None,
    validation_stats: Optional[ValidationStats] = None,
) -> TimeSeries:
    """Load a series from CSV.

    Rows with a missing or unparseable timestamp are skipped. Non-numeric
    cells are dropped from that row's values. When two rows share a date the
    later row in the file wins.

    Args:
        file_path: Path to the CSV file.
        timestamp_field: Timestamp column name. Defaults to the configured
            column (TIME_WINDOW_TIMESTAMP_COLUMN, else "timestamp").
        validation_stats: Optional stats object to record row results in.

    Returns:
        An ascending, deduplicated TimeSeries.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the timestamp column is missing from the header.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Series file not found: {file_path}")

    timestamp_field = timestamp_field or settings.timestamp_column()
    stats = validation_stats if validation_stats is not None else ValidationStats()
    points_by_day: Dict[date, TimeSeriesPoint] = {}

    with timed_operation("series_load", file=os.path.basename(file_path)):
        with open(file_path, 'r', newline='', encoding='utf-8') as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None or timestamp_field not in reader.fieldnames:
                raise ValueError(
                    f"Series file {file_path} has no '{timestamp_field}' column "
                    f"(columns: {reader.fieldnames or []})"
                )

            # Line 1 is the header
            for line_number, row in enumerate(reader, start=2):
                result = validate_series_row(row, timestamp_field, line_number=line_number)

                day = None if result.has_errors() else parse_date(row.get(timestamp_field))
                if day is None and not result.has_errors():
                    result.is_valid = False
                    result.skipped = True
                    result.skip_reason = "invalid_timestamp"
                    result.add_issue(ValidationIssue(
                        field_name=timestamp_field,
                        issue_type="invalid",
                        message=f"Timestamp {row.get(timestamp_field)!r} is not a date",
                        severity=ValidationSeverity.ERROR,
                        line_number=line_number,
                    ))

                stats.record_result(result)
                if result.has_errors():
                    logger.warning(f"Skipping line {line_number} of {file_path}: {result.skip_reason}")
                    continue

                values = {}
                for name, raw in row.items():
                    if name is None or name == timestamp_field:
                        continue
                    number = parse_numeric(raw)
                    if number is not None:
                        values[name] = number

                if day in points_by_day:
                    stats.duplicate_rows += 1
                    logger.warning(f"Duplicate date {day} at line {line_number}; keeping the later row")
                points_by_day[day] = TimeSeriesPoint(timestamp=day, values=values)

    stats.log_summary(os.path.basename(file_path))
    return TimeSeries(points_by_day[day] for day in sorted(points_by_day))
