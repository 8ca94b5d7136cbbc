"""
Window Chart Module

Renders a published window as a simple line chart using ReportLab graphics.
The chart is a rendering-layer consumer of FilterController: it only reads
the WindowSelection it is given.

Usage:
    from window_chart import create_window_chart, render_window_pdf

    drawing = create_window_chart(controller.selection, "revenue")
    render_window_pdf(controller.selection, "revenue", "revenue_window.pdf")
"""

import logging
from typing import List, Tuple

from reportlab.graphics import renderPDF
from reportlab.graphics.shapes import Circle, Drawing, Line, String
from reportlab.lib import colors

from constants import ChartLayout, MONTH_TICK_FORMAT
from filter_controller import WindowSelection
from series_windower import TimeSeriesPoint

logger = logging.getLogger(__name__)

CHART_COLORS = {
    "line": colors.HexColor("#0077B6"),
    "axis": colors.HexColor("#757575"),
    "text": colors.HexColor("#212121"),
    "muted": colors.HexColor("#546E7A"),
}


def normalize_values(values: List[float], low: float, high: float) -> List[float]:
    """Map values onto the vertical range [low, high]."""
    if not values:
        return []
    min_val = min(values)
    max_val = max(values)
    if max_val == min_val:
        return [(low + high) / 2] * len(values)
    scale = (high - low) / (max_val - min_val)
    return [low + (v - min_val) * scale for v in values]


def _plottable(selection: WindowSelection, value_key: str) -> List[Tuple[TimeSeriesPoint, float]]:
    pairs = []
    for point in selection.points:
        value = point.value(value_key)
        if value is None:
            logger.debug(f"Point {point.day} has no '{value_key}' value; skipped")
            continue
        pairs.append((point, value))
    return pairs


def create_window_chart(
    selection: WindowSelection,
    value_key: str,
    width: int = ChartLayout.WIDTH,
    height: int = ChartLayout.HEIGHT,
) -> Drawing:
    """Create a line chart of one value column across the window.

    Args:
        selection: The window to draw.
        value_key: Name of the value to plot.
        width: Drawing width in points.
        height: Drawing height in points.

    Returns:
        reportlab.graphics.shapes.Drawing with title, axis and line.
    """
    drawing = Drawing(width, height)

    title = String(
        ChartLayout.PADDING_LEFT,
        height - ChartLayout.PADDING_TOP / 2 - ChartLayout.TITLE_FONT_SIZE / 2,
        f"{value_key} - {selection.label} ({selection.interval})",
        fontSize=ChartLayout.TITLE_FONT_SIZE,
        fillColor=CHART_COLORS["text"],
    )
    drawing.add(title)

    left = ChartLayout.PADDING_LEFT
    right = width - ChartLayout.PADDING_RIGHT
    bottom = ChartLayout.PADDING_BOTTOM
    top = height - ChartLayout.PADDING_TOP

    drawing.add(Line(left, bottom, right, bottom, strokeColor=CHART_COLORS["axis"]))

    pairs = _plottable(selection, value_key)
    if not pairs:
        logger.warning(f"No '{value_key}' data in the {selection.label} window")
        drawing.add(String(
            (left + right) / 2, (bottom + top) / 2, "No data for this range",
            fontSize=ChartLayout.TICK_FONT_SIZE + 2,
            fillColor=CHART_COLORS["muted"],
            textAnchor="middle",
        ))
        return drawing

    values = [value for _, value in pairs]
    ys = normalize_values(values, bottom + ChartLayout.POINT_RADIUS * 2, top)
    if len(pairs) == 1:
        xs = [(left + right) / 2]
    else:
        step = (right - left) / (len(pairs) - 1)
        xs = [left + i * step for i in range(len(pairs))]

    for i in range(len(pairs) - 1):
        drawing.add(Line(
            xs[i], ys[i], xs[i + 1], ys[i + 1],
            strokeColor=CHART_COLORS["line"],
            strokeWidth=ChartLayout.LINE_WIDTH,
        ))

    for (point, _), x, y in zip(pairs, xs, ys):
        drawing.add(Circle(
            x, y, ChartLayout.POINT_RADIUS,
            fillColor=CHART_COLORS["line"],
            strokeColor=CHART_COLORS["line"],
        ))
        drawing.add(String(
            x, bottom - ChartLayout.TICK_FONT_SIZE - 4,
            point.day.strftime(MONTH_TICK_FORMAT),
            fontSize=ChartLayout.TICK_FONT_SIZE,
            fillColor=CHART_COLORS["muted"],
            textAnchor="middle",
        ))

    # Min/max labels on the value axis
    for label_value in sorted({min(values), max(values)}):
        y = ys[values.index(label_value)]
        drawing.add(String(
            left - 4, y - ChartLayout.TICK_FONT_SIZE / 3,
            f"{label_value:,.0f}",
            fontSize=ChartLayout.TICK_FONT_SIZE,
            fillColor=CHART_COLORS["muted"],
            textAnchor="end",
        ))

    return drawing


def render_window_pdf(selection: WindowSelection, value_key: str, file_path: str) -> str:
    """Write the window chart to a PDF file and return the path."""
    drawing = create_window_chart(selection, value_key)
    renderPDF.drawToFile(drawing, file_path, msg=f"{value_key} - {selection.label}")
    logger.info(f"Wrote {selection.label} chart for '{value_key}' to {file_path}")
    return file_path
