from datetime import date

from reportlab.graphics.shapes import Circle, Drawing, Line, String

from filter_controller import WindowSelection
from range_resolver import Interval, RangeOption
from series_windower import TimeSeriesPoint
from window_chart import create_window_chart, normalize_values, render_window_pdf


def _selection(values) -> WindowSelection:
    points = tuple(
        TimeSeriesPoint(date(2026, month, 1), {} if value is None else {"revenue": value})
        for month, value in enumerate(values, start=1)
    )
    return WindowSelection(
        option=RangeOption.LAST_QUARTER,
        interval=Interval(date(2025, 10, 1), date(2025, 12, 31)),
        points=points,
    )


def _shapes(drawing: Drawing, kind) -> list:
    return [shape for shape in drawing.contents if isinstance(shape, kind)]


def test_normalize_values_spans_range() -> None:
    assert normalize_values([10.0, 20.0, 15.0], 0, 100) == [0.0, 100.0, 50.0]
    assert normalize_values([5.0, 5.0], 0, 100) == [50.0, 50.0]
    assert normalize_values([], 0, 100) == []


def test_chart_draws_one_marker_per_point() -> None:
    drawing = create_window_chart(_selection([100.0, 120.0, 90.0]), "revenue")

    assert len(_shapes(drawing, Circle)) == 3
    # Axis plus two connecting segments
    assert len(_shapes(drawing, Line)) == 3
    texts = [s.text for s in _shapes(drawing, String)]
    assert texts[0].startswith("revenue - Last Quarter")
    assert "Jan 26" in texts


def test_chart_skips_points_without_value() -> None:
    drawing = create_window_chart(_selection([100.0, None, 90.0]), "revenue")

    assert len(_shapes(drawing, Circle)) == 2


def test_empty_window_draws_placeholder() -> None:
    drawing = create_window_chart(_selection([]), "revenue")

    assert _shapes(drawing, Circle) == []
    assert "No data for this range" in [s.text for s in _shapes(drawing, String)]


def test_render_window_pdf_writes_file(tmp_path) -> None:
    path = tmp_path / "window.pdf"

    render_window_pdf(_selection([1.0, 2.0]), "revenue", str(path))

    assert path.read_bytes().startswith(b"%PDF")
