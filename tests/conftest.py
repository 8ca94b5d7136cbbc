import logging
from datetime import date

import pytest

from series_windower import TimeSeries, TimeSeriesPoint


# Mar 2025 .. Feb 2026, one point on the first of each month
MONTHS = [(2025, m) for m in range(3, 13)] + [(2026, 1), (2026, 2)]


def monthly_point(year: int, month: int, revenue: float = 0.0) -> TimeSeriesPoint:
    return TimeSeriesPoint(date(year, month, 1), {"revenue": revenue, "target": revenue - 1000})


@pytest.fixture
def monthly_series() -> TimeSeries:
    return TimeSeries(
        monthly_point(year, month, 50000 + i * 5000) for i, (year, month) in enumerate(MONTHS)
    )


@pytest.fixture
def today() -> date:
    return date(2026, 3, 15)


@pytest.fixture(autouse=True)
def restore_root_logger():
    # configure_logging replaces root handlers; undo it after CLI tests
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
