"""
Filter Controller Module

Owns the selection state of one view and turns selection events into a
published window. Listeners only ever see a fully resolved, valid interval:
a half-finished custom pick keeps the last published window in place until
the pick is finalized.

Usage:
    from filter_controller import FilterController

    controller = FilterController(series, listener=chart.update)
    controller.change(RangeOption.LAST_QUARTER)

    controller.begin_custom()
    controller.pick(Interval(date(2026, 1, 1)))                    # first click
    controller.pick(Interval(date(2026, 1, 1), date(2026, 1, 31)))  # publishes
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple, Union

import settings
from custom_range_validator import CustomRangeValidator, correct_pick
from performance_timing import timed_operation
from range_resolver import Interval, RangeOption, resolve
from series_windower import TimeSeriesPoint, window_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowSelection:
    """The window handed to the rendering layer.

    Attributes:
        option: The range option that produced the window.
        interval: The resolved interval (always complete).
        points: The windowed points in series order.
    """
    option: RangeOption
    interval: Interval
    points: Tuple[TimeSeriesPoint, ...]

    @property
    def label(self) -> str:
        if self.option is RangeOption.CUSTOM:
            return self.interval.label
        return self.option.label

    def values(self, key: str) -> List[Optional[float]]:
        """Values of one series column across the window (None where missing)."""
        return [point.value(key) for point in self.points]


WindowListener = Callable[[WindowSelection], None]


class FilterController:
    """Mediates between selection events and the windowing functions.

    Args:
        series: The full ascending series, supplied up front.
        option: Initial option; defaults to the configured default range.
        clock: Returns the current date. Injected so tests can fix "now".
        listener: Optional consumer notified on every published window.
    """

    def __init__(
        self,
        series: Sequence[TimeSeriesPoint],
        option: Optional[Union[RangeOption, str]] = None,
        clock: Callable[[], date] = date.today,
        listener: Optional[WindowListener] = None,
    ):
        self._series = series
        self._clock = clock
        self._listeners: List[WindowListener] = []
        if listener is not None:
            self._listeners.append(listener)
        self._validator = CustomRangeValidator()
        self._option = RangeOption.parse(option) if option is not None else settings.default_range_option()
        self._custom_interval: Optional[Interval] = None
        self._selection = self._compute(self._option, None)

    @property
    def option(self) -> RangeOption:
        return self._option

    @property
    def custom_interval(self) -> Optional[Interval]:
        """The last finalized custom interval, only while CUSTOM is active."""
        return self._custom_interval

    @property
    def selection(self) -> WindowSelection:
        """The window currently visible to consumers."""
        return self._selection

    @property
    def validator(self) -> CustomRangeValidator:
        return self._validator

    def add_listener(self, listener: WindowListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: WindowListener) -> None:
        self._listeners.remove(listener)

    def change(
        self,
        option: Union[RangeOption, str],
        interval: Optional[Interval] = None,
    ) -> Optional[WindowSelection]:
        """Apply a selection event.

        Args:
            option: The selected option.
            interval: For CUSTOM, the finalized interval. Ignored otherwise.

        Returns:
            The published selection, or None when a CUSTOM event arrives
            without a complete interval and the previous window is kept.

        Raises:
            UnknownRangeOptionError: If option is not a known range option.
        """
        option = RangeOption.parse(option)

        if option is not RangeOption.CUSTOM:
            self._option = option
            self._custom_interval = None
            return self._publish(self._compute(option, None))

        self._option = RangeOption.CUSTOM
        if interval is None or not interval.is_complete:
            logger.debug(f"Custom range pending; keeping {self._selection.label} window")
            return None

        finalized = correct_pick(interval, self._clock())
        self._custom_interval = finalized
        return self._publish(self._compute(RangeOption.CUSTOM, finalized))

    def begin_custom(self) -> None:
        """Switch to CUSTOM and start a new pick anchored on today."""
        self._validator.begin(self._clock())
        self.change(RangeOption.CUSTOM)

    def pick(self, interval: Optional[Interval]) -> Optional[WindowSelection]:
        """Forward a calendar pick; publishes once the pick is finalized."""
        finalized = self._validator.select(interval, self._clock())
        if finalized is None:
            return None
        return self.change(RangeOption.CUSTOM, finalized)

    def _compute(self, option: RangeOption, interval: Optional[Interval]) -> WindowSelection:
        with timed_operation("window_recompute", log_level=logging.DEBUG, option=option.value):
            if option is RangeOption.CUSTOM and interval is None:
                # Same fallback as the windower: show the last 6 months
                interval = resolve(RangeOption.LAST_6_MONTHS, self._clock())
                points = window_for(RangeOption.CUSTOM, self._series, None)
            else:
                if interval is None:
                    interval = resolve(option, self._clock())
                points = window_for(option, self._series, interval)
        return WindowSelection(option=option, interval=interval, points=points)

    def _publish(self, selection: WindowSelection) -> WindowSelection:
        """Store the selection and notify every listener.

        The selection is current before any listener runs. A failing listener
        does not stop the others; the first failure is re-raised once all of
        them have been called.
        """
        self._selection = selection
        logger.debug(
            f"Publishing {selection.label} window: {selection.interval}, {len(selection.points)} points"
        )
        failure = None
        for listener in list(self._listeners):
            try:
                listener(selection)
            except Exception as e:
                logger.error(f"Window listener {listener!r} failed: {e}")
                if failure is None:
                    failure = e
        if failure is not None:
            raise failure
        return selection
