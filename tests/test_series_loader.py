from datetime import date

import pytest

from series_loader import load_series
from validation import ValidationStats, validate_series_row


def _write(tmp_path, text: str):
    path = tmp_path / "series.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_series_parses_points(tmp_path) -> None:
    path = _write(tmp_path, "timestamp,revenue,target\n2026-01-01,100000,90000\n2026-02-01,105000,95000\n")

    series = load_series(str(path))

    assert [p.day for p in series] == [date(2026, 1, 1), date(2026, 2, 1)]
    assert dict(series[0].values) == {"revenue": 100000.0, "target": 90000.0}


def test_load_series_sorts_rows(tmp_path) -> None:
    path = _write(tmp_path, "timestamp,revenue\n2026-02-01,2\n2025-12-01,0\n2026-01-01,1\n")

    series = load_series(str(path))

    assert [p.value("revenue") for p in series] == [0.0, 1.0, 2.0]


def test_load_series_keeps_later_duplicate(tmp_path) -> None:
    path = _write(tmp_path, "timestamp,revenue\n2026-01-01,1\n2026-01-01,9\n")
    stats = ValidationStats()

    series = load_series(str(path), validation_stats=stats)

    assert len(series) == 1
    assert series[0].value("revenue") == 9.0
    assert stats.duplicate_rows == 1


def test_load_series_skips_bad_timestamps(tmp_path) -> None:
    path = _write(tmp_path, "timestamp,revenue\n,1\nnot-a-date,2\n2026-01,3\n")
    stats = ValidationStats()

    series = load_series(str(path), validation_stats=stats)

    assert [p.day for p in series] == [date(2026, 1, 1)]
    assert stats.total_rows == 3
    assert stats.skipped_rows == 2
    assert stats.skipped_by_reason == {"missing_timestamp": 1, "invalid_timestamp": 1}


def test_load_series_drops_non_numeric_cells(tmp_path) -> None:
    path = _write(tmp_path, 'timestamp,revenue,target\n2026-01-01,"52,000",n/a\n')

    series = load_series(str(path))

    assert dict(series[0].values) == {"revenue": 52000.0}


def test_custom_timestamp_column(tmp_path) -> None:
    path = _write(tmp_path, "month,revenue\n2026-01-01,1\n")

    series = load_series(str(path), timestamp_field="month")

    assert series[0].day == date(2026, 1, 1)


def test_timestamp_column_from_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TIME_WINDOW_TIMESTAMP_COLUMN", "period")
    path = _write(tmp_path, "period,revenue\n2026-01-01,1\n")

    assert len(load_series(str(path))) == 1


def test_missing_timestamp_column_raises(tmp_path) -> None:
    path = _write(tmp_path, "month,revenue\n2026-01-01,1\n")

    with pytest.raises(ValueError, match="timestamp"):
        load_series(str(path))


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_series(str(tmp_path / "nope.csv"))


def test_validate_series_row_flags_non_numeric_values() -> None:
    result = validate_series_row({"timestamp": "2026-01-01", "revenue": "abc", "target": ""}, "timestamp")

    assert result.is_valid
    assert not result.skipped
    assert {issue.issue_type for issue in result.issues} == {"non_numeric", "empty"}
    assert result.has_warnings()
    assert not result.has_errors()


def test_validate_series_row_missing_timestamp_is_an_error() -> None:
    result = validate_series_row({"timestamp": " ", "revenue": "1"}, "timestamp", line_number=4)

    assert result.has_errors()
    assert result.skip_reason == "missing_timestamp"
    assert str(result.issues[0]) == "[line 4] timestamp: Timestamp is empty"


def test_unparseable_timestamp_is_recorded_as_timestamp_error(tmp_path) -> None:
    path = _write(tmp_path, "timestamp,revenue\nsoon,1\n2026-02-01,2\n")
    stats = ValidationStats()

    series = load_series(str(path), validation_stats=stats)

    assert [p.day for p in series] == [date(2026, 2, 1)]
    assert stats.issues_by_field == {"timestamp": 1}
    assert stats.valid_rows == 1
