"""
Configuration for the time window filter.

Values are read from environment variables, optionally loaded from a .env
file in the working directory via python-dotenv.

    TIME_WINDOW_DEFAULT_RANGE     initial range option (default: last_6_months)
    TIME_WINDOW_TIMESTAMP_COLUMN  CSV column holding the sample date (default: timestamp)
    TIME_WINDOW_VALUE_COLUMN      CSV column to chart (default: first value column)
"""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from constants import (
    DEFAULT_RANGE_ENV_VAR,
    DEFAULT_RANGE_VALUE,
    DEFAULT_TIMESTAMP_COLUMN,
    TIMESTAMP_COLUMN_ENV_VAR,
    VALUE_COLUMN_ENV_VAR,
)
from range_resolver import RangeOption, UnknownRangeOptionError

logger = logging.getLogger(__name__)


def load_environment(dotenv_path: Optional[str] = None) -> bool:
    """Load a .env file (default: nearest one from the working directory) without overriding set variables."""
    dotenv_path = dotenv_path or find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    loaded = load_dotenv(dotenv_path, override=False)
    if loaded:
        logger.debug(f"Loaded environment from {dotenv_path}")
    return loaded


def default_range_option() -> RangeOption:
    """The range option a new view starts with."""
    raw = os.getenv(DEFAULT_RANGE_ENV_VAR)
    if not raw:
        return RangeOption(DEFAULT_RANGE_VALUE)
    try:
        return RangeOption.parse(raw)
    except UnknownRangeOptionError as e:
        logger.warning(f"{DEFAULT_RANGE_ENV_VAR}: {e}. Using {DEFAULT_RANGE_VALUE}.")
        return RangeOption(DEFAULT_RANGE_VALUE)


def timestamp_column() -> str:
    return os.getenv(TIMESTAMP_COLUMN_ENV_VAR) or DEFAULT_TIMESTAMP_COLUMN


def value_column() -> Optional[str]:
    return os.getenv(VALUE_COLUMN_ENV_VAR) or None
