"""
Time Window Report

Command-line entry point: loads a series from CSV, applies a range selection
the same way the dashboard filter does, prints the resulting window and
optionally renders it as a PDF chart.

Usage:
    $ time-window revenue.csv --range last_quarter
    $ time-window revenue.csv --from 2026-01-01 --to 2026-01-31 --chart january.pdf
    $ LOG_LEVEL=DEBUG time-window revenue.csv --range last_year --today 2026-03-15
"""

import argparse
import logging
import sys
from datetime import date
from typing import List, Optional

import settings
from date_utilities import parse_date_argument
from filter_controller import FilterController, WindowSelection
from logging_config import add_log_level_argument, configure_logging
from range_resolver import Interval, RangeOption
from series_loader import load_series
from window_chart import render_window_pdf

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show the window of a time series for a reporting range")
    parser.add_argument("series_file", help="CSV file with a timestamp column and numeric value columns")
    parser.add_argument(
        "--range",
        dest="range_option",
        choices=[option.value for option in RangeOption],
        default=None,
        help=f"Reporting range. Default: {settings.default_range_option().value}",
    )
    parser.add_argument("--from", dest="start", type=parse_date_argument, default=None,
                        help="Start of a custom range (implies --range custom)")
    parser.add_argument("--to", dest="end", type=parse_date_argument, default=None,
                        help="End of a custom range; clamped to today")
    parser.add_argument("--today", type=parse_date_argument, default=None,
                        help="Date to resolve ranges against. Default: the current date")
    parser.add_argument("--value-column", default=None,
                        help="Value column to chart. Default: TIME_WINDOW_VALUE_COLUMN or the first column")
    parser.add_argument("--chart", metavar="PATH", default=None, help="Write the window chart to this PDF file")
    add_log_level_argument(parser)
    return parser


def _format_value(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.2f}"


def format_selection(selection: WindowSelection) -> str:
    lines = [
        f"Range: {selection.label}",
        f"Interval: {selection.interval}",
        f"Points: {len(selection.points)}",
    ]
    for point in selection.points:
        values = ", ".join(f"{name}={_format_value(value)}" for name, value in point.values.items())
        lines.append(f"  {point.day.isoformat()}  {values}")
    return "\n".join(lines)


def _chart_column(selection: WindowSelection, requested: Optional[str]) -> Optional[str]:
    if requested:
        return requested
    for point in selection.points:
        if point.values:
            return next(iter(point.values))
    return None


def main(argv: Optional[List[str]] = None) -> int:
    settings.load_environment()
    parser = build_parser()
    args = parser.parse_args(argv)

    custom_requested = args.start is not None or args.end is not None
    if custom_requested and args.range_option not in (None, RangeOption.CUSTOM.value):
        parser.error("--from/--to can only be combined with --range custom")
    if args.end is not None and args.start is None:
        parser.error("--to requires --from")

    configure_logging(log_level=args.log_level)

    try:
        series = load_series(args.series_file)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load series: {e}")
        return 1

    today = args.today or date.today()
    controller = FilterController(series, clock=lambda: today)

    if custom_requested or args.range_option == RangeOption.CUSTOM.value:
        controller.begin_custom()
        if args.start is not None:
            controller.pick(Interval(args.start))
        if args.end is not None:
            controller.pick(Interval(args.start, args.end))
        if controller.custom_interval is None:
            print(f"Custom range pending ({controller.validator.display_label}); "
                  f"showing the {controller.selection.label} window")
    elif args.range_option is not None:
        controller.change(args.range_option)

    selection = controller.selection
    print(format_selection(selection))

    if args.chart:
        column = _chart_column(selection, args.value_column or settings.value_column())
        if column is None:
            logger.warning("No value column to chart; skipping chart output")
        else:
            render_window_pdf(selection, column, args.chart)

    return 0


if __name__ == "__main__":
    sys.exit(main())
