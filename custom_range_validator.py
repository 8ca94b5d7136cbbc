"""
Custom Range Validator Module

Models the two-click custom date pick as an explicit state machine:

    IDLE --begin()--> PARTIAL_FROM --select(complete)--> FINALIZED
                           ^                                 |
                           +------------begin()--------------+

Invalid picks are never rejected. A bound in the future is clamped to "now"
and an inverted pair is collapsed onto the later pick, so every gesture maps
to the nearest valid interval.

Usage:
    from custom_range_validator import CustomRangeValidator, PickState

    validator = CustomRangeValidator()
    validator.begin(today)
    result = validator.select(Interval(date(2026, 1, 1), date(2026, 1, 31)), now=today)
    if result is not None:
        controller.change(RangeOption.CUSTOM, result)
"""

import logging
from dataclasses import replace
from datetime import datetime, date
from enum import Enum
from typing import Optional, Union

from date_utilities import as_date, format_interval_label
from range_resolver import Interval

logger = logging.getLogger(__name__)


class PickState(Enum):
    """States of a custom date pick."""
    IDLE = "idle"
    PARTIAL_FROM = "partial_from"
    FINALIZED = "finalized"


def correct_pick(pick: Interval, now: Union[date, datetime]) -> Interval:
    """Normalize a caller-supplied pick into a valid interval.

    Corrections are applied in order:
        1. An end after now is clamped to now.
        2. A start after the (clamped) end is pulled forward to the end.

    Example:
        >>> correct_pick(Interval(date(2026, 2, 10), date(2026, 2, 1)), date(2026, 3, 1))
        Interval(start=datetime.date(2026, 2, 1), end=datetime.date(2026, 2, 1))
    """
    today = as_date(now)
    start = as_date(pick.start)
    end = as_date(pick.end) if pick.end is not None else None

    if end is not None and end > today:
        logger.debug(f"Clamping future end {end} to {today}")
        end = today

    if end is not None and start > end:
        logger.debug(f"Start {start} after end {end}; pulling start to {end}")
        start = end

    return replace(pick, start=start, end=end)


def is_selectable(day: Union[date, datetime], today: Union[date, datetime]) -> bool:
    """Whether the calendar should allow picking this day (no future days)."""
    return as_date(day) <= as_date(today)


class CustomRangeValidator:
    """Accumulates and corrects a custom interval across two picks.

    One instance belongs to one view; it is never shared.
    """

    def __init__(self):
        self._state = PickState.IDLE
        self._pending: Optional[Interval] = None

    @property
    def state(self) -> PickState:
        return self._state

    @property
    def pending(self) -> Optional[Interval]:
        """The interval being picked (complete once FINALIZED)."""
        return self._pending

    @property
    def display_label(self) -> str:
        if self._pending is None:
            return format_interval_label(None, None)
        return self._pending.label

    def begin(self, today: Union[date, datetime]) -> None:
        """Start a new pick anchored on today."""
        self._pending = Interval(as_date(today), None)
        self._transition(PickState.PARTIAL_FROM)

    def select(self, pick: Optional[Interval], now: Union[date, datetime]) -> Optional[Interval]:
        """Apply a pick from the calendar.

        Args:
            pick: The range reported by the calendar. None (a cleared
                selection) is ignored.
            now: Current date used to clamp future bounds.

        Returns:
            The corrected interval once both bounds are set, otherwise None.
            A None result must not be treated as a filter change.
        """
        if pick is None:
            logger.debug("Ignoring empty pick")
            return None

        corrected = correct_pick(pick, now)
        self._pending = corrected

        if corrected.is_complete:
            self._transition(PickState.FINALIZED)
            return corrected

        self._transition(PickState.PARTIAL_FROM)
        return None

    def reset(self) -> None:
        self._pending = None
        self._transition(PickState.IDLE)

    def _transition(self, new_state: PickState) -> None:
        if new_state is not self._state:
            logger.debug(
                f"Custom pick {self._state.value} -> {new_state.value} ({self.display_label})"
            )
        self._state = new_state

    def __repr__(self) -> str:
        return f"CustomRangeValidator(state={self._state.value}, pending={self._pending})"
