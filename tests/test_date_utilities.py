import argparse
from datetime import date, datetime

import pytest

from date_utilities import (
    end_of_month,
    end_of_quarter,
    format_interval_label,
    parse_date,
    parse_date_argument,
    shift_months,
    start_of_quarter,
)


@pytest.mark.parametrize("value, expected", [
    ("2026-01-06", date(2026, 1, 6)),
    ("2026-01", date(2026, 1, 1)),
    ("06.01.2026", date(2026, 1, 6)),
    ("2026-01-06T10:30:00", date(2026, 1, 6)),
    (datetime(2026, 1, 6, 10, 30), date(2026, 1, 6)),
    ("", None),
    (None, None),
    ("garbage", None),
])
def test_parse_date(value, expected) -> None:
    assert parse_date(value) == expected


def test_parse_date_argument_rejects_garbage() -> None:
    assert parse_date_argument("31.01.2026") == date(2026, 1, 31)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_date_argument("January")


def test_shift_months_across_year_boundaries() -> None:
    assert shift_months(date(2026, 1, 15), -1) == date(2025, 12, 15)
    assert shift_months(date(2025, 11, 30), 3) == date(2026, 2, 28)
    assert shift_months(date(2024, 8, 31), -6) == date(2024, 2, 29)


def test_month_and_quarter_boundaries() -> None:
    assert end_of_month(date(2024, 2, 10)) == date(2024, 2, 29)
    assert start_of_quarter(date(2026, 8, 20)) == date(2026, 7, 1)
    assert end_of_quarter(date(2026, 8, 20)) == date(2026, 9, 30)
    assert end_of_quarter(date(2025, 11, 1)) == date(2025, 12, 31)


def test_format_interval_label() -> None:
    assert format_interval_label(None, None) == "Pick dates"
    assert format_interval_label(date(2026, 1, 5), None) == "Jan 05, 2026"
    assert format_interval_label(date(2026, 1, 5), date(2026, 2, 1)) == "Jan 05, 2026 - Feb 01, 2026"
