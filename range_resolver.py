"""
Range Resolver Module

Maps a named preset to concrete calendar boundaries relative to "now". The
resolver is pure: the current date is always passed in by the caller, never
read from the system clock here.

Usage:
    from range_resolver import (
        Interval,
        RangeOption,
        UnknownRangeOptionError,
        resolve,
        get_range_options,
    )

    interval = resolve(RangeOption.LAST_QUARTER, date(2026, 3, 15))
    # Interval(start=2025-10-01, end=2025-12-31)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, date
from enum import Enum
from typing import Dict, List, Optional, Union

from constants import LAST_6_MONTHS_SPAN
from date_utilities import (
    as_date,
    end_of_month,
    end_of_quarter,
    format_interval_label,
    shift_months,
    start_of_month,
    start_of_quarter,
    start_of_year,
)

logger = logging.getLogger(__name__)


class UnknownRangeOptionError(ValueError):
    """Raised when a value outside the closed set of range options is used."""


class RangeOption(Enum):
    """Selectable reporting windows."""
    LAST_MONTH = "last_month"
    LAST_QUARTER = "last_quarter"
    LAST_6_MONTHS = "last_6_months"
    LAST_YEAR = "last_year"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _OPTION_LABELS[self]

    @property
    def is_preset(self) -> bool:
        return self is not RangeOption.CUSTOM

    @classmethod
    def parse(cls, value: Union['RangeOption', str]) -> 'RangeOption':
        """Coerce a wire value (e.g. "last_quarter") or member to a RangeOption.

        Raises:
            UnknownRangeOptionError: If the value is not a known option.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(option.value for option in cls)
            raise UnknownRangeOptionError(
                f"Unknown range option: {value!r}. Valid options are: {valid}"
            ) from None


_OPTION_LABELS: Dict[RangeOption, str] = {
    RangeOption.LAST_MONTH: "Last Month",
    RangeOption.LAST_QUARTER: "Last Quarter",
    RangeOption.LAST_6_MONTHS: "Last 6 Months",
    RangeOption.LAST_YEAR: "Last Year",
    RangeOption.CUSTOM: "Custom Range",
}


@dataclass(frozen=True)
class Interval:
    """A calendar-day interval, inclusive on both ends.

    Attributes:
        start: First day of the interval.
        end: Last day of the interval. None while a custom pick is still
            waiting for its second click; never None in a published window.
    """
    start: date
    end: Optional[date] = None

    def __post_init__(self):
        # Bounds are calendar days even when built from datetimes
        object.__setattr__(self, "start", as_date(self.start))
        if self.end is not None:
            object.__setattr__(self, "end", as_date(self.end))

    @property
    def is_complete(self) -> bool:
        return self.end is not None

    @property
    def days_in_range(self) -> int:
        """Number of days in the range (inclusive); 0 while pending."""
        if self.end is None:
            return 0
        return (self.end - self.start).days + 1

    @property
    def label(self) -> str:
        return format_interval_label(self.start, self.end)

    def contains(self, value: Union[date, datetime]) -> bool:
        """Check whether a day falls inside a complete interval."""
        if self.end is None:
            return False
        return self.start <= as_date(value) <= self.end

    def __str__(self) -> str:
        end = self.end.isoformat() if self.end else "..."
        return f"{self.start.isoformat()} to {end}"


def resolve(option: RangeOption, now: Union[date, datetime]) -> Interval:
    """Resolve a preset option into a concrete interval.

    Args:
        option: One of the four preset options.
        now: The current date (or datetime; only its day is used).

    Returns:
        Interval with both bounds set and end <= now.

    Raises:
        UnknownRangeOptionError: For CUSTOM or any non-preset value. Custom
            intervals come from CustomRangeValidator.
    """
    today = as_date(now)

    if option is RangeOption.LAST_MONTH:
        previous_month = shift_months(today, -1)
        interval = Interval(start_of_month(previous_month), end_of_month(previous_month))

    elif option is RangeOption.LAST_QUARTER:
        previous_quarter = shift_months(start_of_quarter(today), -3)
        interval = Interval(previous_quarter, end_of_quarter(previous_quarter))

    elif option is RangeOption.LAST_6_MONTHS:
        interval = Interval(shift_months(today, -LAST_6_MONTHS_SPAN), today)

    elif option is RangeOption.LAST_YEAR:
        interval = Interval(start_of_year(shift_months(today, -12)), today)

    else:
        raise UnknownRangeOptionError(f"Cannot resolve range option: {option!r}")

    logger.debug(f"Resolved {option.value} relative to {today}: {interval}")
    return interval


def get_range_options() -> List[Dict[str, str]]:
    """Get the selectable options for a UI dropdown, in display order."""
    return [{"value": option.value, "label": option.label} for option in RangeOption]
