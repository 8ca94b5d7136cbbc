"""
Series Windower Module

Derives the visible slice of a time series for a range option. Presets take a
trailing number of samples (one sample per period of the series), LAST_YEAR
takes the whole series, and CUSTOM filters by an inclusive calendar interval.

While a custom pick is incomplete the window falls back to the LAST_6_MONTHS
slice so a chart is never empty mid-selection.

Usage:
    from series_windower import TimeSeries, TimeSeriesPoint, window_for

    series = TimeSeries(points)
    visible = window_for(RangeOption.LAST_QUARTER, series)
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, date, time
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Sequence as SequenceType, Tuple, Union

from constants import LAST_6_MONTHS_PERIODS, LAST_MONTH_PERIODS, LAST_QUARTER_PERIODS
from date_utilities import as_date
from range_resolver import Interval, RangeOption, UnknownRangeOptionError

logger = logging.getLogger(__name__)


class SeriesOrderError(ValueError):
    """Raised when a series is not strictly ascending by timestamp."""


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One sample of the series.

    Attributes:
        timestamp: When the sample was taken (date or datetime).
        values: Named numeric values of the sample, e.g. {"revenue": 52000.0}.
    """
    timestamp: Union[date, datetime]
    values: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so points stay immutable once shared
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @property
    def day(self) -> date:
        return as_date(self.timestamp)

    def value(self, key: str) -> Optional[float]:
        return self.values.get(key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeSeriesPoint):
            return NotImplemented
        return self.timestamp == other.timestamp and dict(self.values) == dict(other.values)

    def __hash__(self) -> int:
        return hash((self.timestamp, tuple(sorted(self.values.items()))))


def _order_key(point: TimeSeriesPoint) -> datetime:
    # Plain dates sort as midnight so date and datetime samples can be mixed
    if isinstance(point.timestamp, datetime):
        return point.timestamp
    return datetime.combine(point.timestamp, time.min)


class TimeSeries(Sequence):
    """An immutable, ascending, deduplicated sequence of points.

    Raises:
        SeriesOrderError: If timestamps are not strictly increasing.
    """

    def __init__(self, points: Iterable[TimeSeriesPoint] = ()):
        self._points: Tuple[TimeSeriesPoint, ...] = tuple(points)
        for previous, current in zip(self._points, self._points[1:]):
            if _order_key(current) <= _order_key(previous):
                raise SeriesOrderError(
                    f"Series must be ascending without duplicates: "
                    f"{current.timestamp} follows {previous.timestamp}"
                )

    @property
    def points(self) -> Tuple[TimeSeriesPoint, ...]:
        return self._points

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TimeSeries(self._points[index])
        return self._points[index]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TimeSeriesPoint]:
        return iter(self._points)

    def __eq__(self, other) -> bool:
        if isinstance(other, TimeSeries):
            return self._points == other._points
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        if not self._points:
            return "TimeSeries([])"
        return (
            f"TimeSeries({len(self._points)} points, "
            f"{self._points[0].day} to {self._points[-1].day})"
        )


# Trailing sample counts for presets that take the tail of the series
TRAILING_PERIODS = {
    RangeOption.LAST_MONTH: LAST_MONTH_PERIODS,
    RangeOption.LAST_QUARTER: LAST_QUARTER_PERIODS,
    RangeOption.LAST_6_MONTHS: LAST_6_MONTHS_PERIODS,
}


def _tail(series: SequenceType[TimeSeriesPoint], count: int) -> Tuple[TimeSeriesPoint, ...]:
    points = tuple(series)
    return points[-count:] if count < len(points) else points


def window_for(
    option: RangeOption,
    series: SequenceType[TimeSeriesPoint],
    interval: Optional[Interval] = None,
) -> Tuple[TimeSeriesPoint, ...]:
    """Compute the visible window of a series.

    Args:
        option: The selected range option.
        series: Ascending, deduplicated points. Never modified.
        interval: The finalized custom interval; only used for CUSTOM.

    Returns:
        A new tuple of points in series order.

    Raises:
        UnknownRangeOptionError: If option is not a RangeOption.
    """
    if not isinstance(option, RangeOption):
        raise UnknownRangeOptionError(f"Cannot window series for range option: {option!r}")

    if option in TRAILING_PERIODS:
        return _tail(series, TRAILING_PERIODS[option])

    if option is RangeOption.LAST_YEAR:
        return tuple(series)

    if option is RangeOption.CUSTOM:
        if interval is None or not interval.is_complete:
            logger.debug("Custom interval incomplete; falling back to the last 6 months window")
            return _tail(series, TRAILING_PERIODS[RangeOption.LAST_6_MONTHS])
        return tuple(point for point in series if interval.contains(point.timestamp))

    raise UnknownRangeOptionError(f"Cannot window series for range option: {option!r}")
