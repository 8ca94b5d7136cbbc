"""
Centralized Constants Module for the Time Window Filter

This module provides named constants for the magic numbers and strings used
throughout the codebase. Centralizing constants keeps the resolver, windower
and chart code consistent and makes values easy to change in one place.

Categories:
- Trailing Window Sizes
- Display Formats
- Environment Variables
- Chart Layout Constants
"""


# ============================================================================
# TRAILING WINDOW SIZES
# ============================================================================

# Number of trailing period units (one unit = one sample of the series)
LAST_MONTH_PERIODS = 1
LAST_QUARTER_PERIODS = 3
LAST_6_MONTHS_PERIODS = 6

# Calendar months stepped back for the "last 6 months" interval
LAST_6_MONTHS_SPAN = 6

MONTHS_PER_QUARTER = 3


# ============================================================================
# DISPLAY FORMATS
# ============================================================================

# "Jan 05, 2026" - matches the picker button label
INTERVAL_DISPLAY_FORMAT = '%b %d, %Y'

# Axis tick label for monthly points, e.g. "Jan 26"
MONTH_TICK_FORMAT = '%b %y'

PICK_DATES_PLACEHOLDER = "Pick dates"


# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

DEFAULT_RANGE_ENV_VAR = 'TIME_WINDOW_DEFAULT_RANGE'
TIMESTAMP_COLUMN_ENV_VAR = 'TIME_WINDOW_TIMESTAMP_COLUMN'
VALUE_COLUMN_ENV_VAR = 'TIME_WINDOW_VALUE_COLUMN'

DEFAULT_RANGE_VALUE = 'last_6_months'
DEFAULT_TIMESTAMP_COLUMN = 'timestamp'


# ============================================================================
# CHART LAYOUT CONSTANTS
# ============================================================================

class ChartLayout:
    """Dimensions (in points) for the window chart drawing."""
    WIDTH = 480
    HEIGHT = 240
    PADDING_LEFT = 48
    PADDING_RIGHT = 16
    PADDING_TOP = 32
    PADDING_BOTTOM = 32
    TITLE_FONT_SIZE = 12
    TICK_FONT_SIZE = 7
    LINE_WIDTH = 1.5
    POINT_RADIUS = 2
