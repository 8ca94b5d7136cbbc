import pytest

from time_window_report import main

CSV = "timestamp,revenue\n" + "".join(
    f"{year}-{month:02d}-01,{50000 + i * 5000}\n"
    for i, (year, month) in enumerate([(2025, m) for m in range(3, 13)] + [(2026, 1), (2026, 2)])
)


@pytest.fixture
def series_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TIME_WINDOW_DEFAULT_RANGE", raising=False)
    path = tmp_path / "revenue.csv"
    path.write_text(CSV, encoding="utf-8")
    return str(path)


def test_preset_range(series_file, capsys) -> None:
    assert main([series_file, "--range", "last_quarter", "--today", "2026-03-15"]) == 0

    out = capsys.readouterr().out
    assert "Range: Last Quarter" in out
    assert "Interval: 2025-10-01 to 2025-12-31" in out
    assert "Points: 3" in out
    assert "2025-12-01  revenue=95000" in out


def test_custom_range(series_file, capsys) -> None:
    args = [series_file, "--from", "2026-01-01", "--to", "2026-01-31", "--today", "2026-03-15"]

    assert main(args) == 0

    out = capsys.readouterr().out
    assert "Range: Jan 01, 2026 - Jan 31, 2026" in out
    assert "Points: 1" in out


def test_pending_custom_range_keeps_default_window(series_file, capsys) -> None:
    assert main([series_file, "--from", "2026-01-01", "--today", "2026-03-15"]) == 0

    out = capsys.readouterr().out
    assert "Custom range pending (Jan 01, 2026)" in out
    assert "Range: Last 6 Months" in out
    assert "Points: 6" in out


def test_chart_output(series_file, tmp_path) -> None:
    chart = tmp_path / "chart.pdf"

    assert main([series_file, "--range", "last_year", "--chart", str(chart)]) == 0
    assert chart.exists()


def test_missing_file_exits_with_one(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert main([str(tmp_path / "missing.csv")]) == 1


def test_from_with_preset_is_an_argument_error(series_file) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([series_file, "--range", "last_month", "--from", "2026-01-01"])

    assert excinfo.value.code == 2


def test_to_without_from_is_an_argument_error(series_file) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([series_file, "--to", "2026-01-01"])

    assert excinfo.value.code == 2
