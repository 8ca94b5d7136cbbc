"""
Date Utilities Module

Provides calendar arithmetic, date parsing and interval formatting for the
time window filter. All arithmetic works on local calendar days; datetimes are
reduced to their date before any comparison.

Usage:
    from date_utilities import (
        as_date,
        parse_date,
        parse_date_argument,
        start_of_month,
        end_of_month,
        shift_months,
        start_of_quarter,
        end_of_quarter,
        format_interval_label,
    )
"""

import argparse
import calendar
import logging
from datetime import datetime, date
from typing import Optional, Union

from constants import INTERVAL_DISPLAY_FORMAT, MONTHS_PER_QUARTER, PICK_DATES_PLACEHOLDER

# Set up logging
logger = logging.getLogger(__name__)

# Supported date formats in order of preference
SUPPORTED_DATE_FORMATS = (
    '%Y-%m-%dT%H:%M:%S',  # ISO format with time
    '%Y-%m-%d',           # ISO format date only
    '%Y-%m',              # Month only (first day of month)
    '%d.%m.%Y',           # European format (German)
    '%m/%d/%Y',           # US format
    '%Y/%m/%d',           # Alternative ISO format
)


def as_date(value: Union[date, datetime]) -> date:
    """Reduce a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse date from various formats into a date object.

    Returns None for empty or unparseable values instead of raising, so
    callers loading external data can skip bad rows and keep going.

    Example:
        >>> parse_date("2026-01-06")
        datetime.date(2026, 1, 6)
        >>> parse_date("2026-01")
        datetime.date(2026, 1, 1)
        >>> parse_date("invalid")
        None  # Logs warning
    """
    if not value:
        return None

    if isinstance(value, (date, datetime)):
        return as_date(value)

    cleaned = str(value).strip()

    for fmt in SUPPORTED_DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        logger.warning(
            f"Invalid date format encountered: '{cleaned}'. "
            f"Supported formats: {', '.join(SUPPORTED_DATE_FORMATS)} or ISO format."
        )
        return None


def parse_date_argument(date_str: str) -> date:
    """
    Parse a date string argument from command line input.

    Raises argparse.ArgumentTypeError on invalid input so argparse prints a
    proper usage error.

    Example:
        >>> parser.add_argument('--from', type=parse_date_argument)
    """
    if not date_str or not str(date_str).strip():
        raise argparse.ArgumentTypeError("Date string cannot be empty")

    cleaned = str(date_str).strip()
    for fmt in ('%Y-%m-%d', '%d.%m.%Y', '%d/%m/%Y'):
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    raise argparse.ArgumentTypeError(
        f"Invalid date format: '{date_str}'. "
        f"Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY format."
    )


def start_of_month(day: date) -> date:
    return day.replace(day=1)


def end_of_month(day: date) -> date:
    _, last_day = calendar.monthrange(day.year, day.month)
    return day.replace(day=last_day)


def shift_months(day: date, months: int) -> date:
    """
    Move a date by a number of calendar months.

    The day of month is clamped to the length of the target month, so
    August 31 shifted back six months lands on the last day of February.

    Example:
        >>> shift_months(date(2025, 8, 31), -6)
        datetime.date(2025, 2, 28)
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    _, last_day = calendar.monthrange(year, month)
    return date(year, month, min(day.day, last_day))


def start_of_quarter(day: date) -> date:
    first_month = ((day.month - 1) // MONTHS_PER_QUARTER) * MONTHS_PER_QUARTER + 1
    return date(day.year, first_month, 1)


def end_of_quarter(day: date) -> date:
    last_month_of_quarter = start_of_quarter(day).month + MONTHS_PER_QUARTER - 1
    return end_of_month(date(day.year, last_month_of_quarter, 1))


def start_of_year(day: date) -> date:
    return date(day.year, 1, 1)


def format_display_date(day: date) -> str:
    """Format a day the way the range picker shows it ("Jan 05, 2026")."""
    return as_date(day).strftime(INTERVAL_DISPLAY_FORMAT)


def format_interval_label(start: Optional[date], end: Optional[date]) -> str:
    """
    Build the picker label for a possibly incomplete interval.

    Example:
        >>> format_interval_label(date(2026, 1, 5), None)
        'Jan 05, 2026'
        >>> format_interval_label(date(2026, 1, 5), date(2026, 1, 20))
        'Jan 05, 2026 - Jan 20, 2026'
    """
    if start is None:
        return PICK_DATES_PLACEHOLDER
    if end is None:
        return format_display_date(start)
    return f"{format_display_date(start)} - {format_display_date(end)}"
