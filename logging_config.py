"""
Centralized logging configuration for the time window filter.

The log level is taken, in order of priority, from:
1. Command-line argument (--log-level)
2. Environment variable (LOG_LEVEL)
3. Default (INFO)

Usage:
    # In the CLI entry point:
    from logging_config import add_log_level_argument, configure_logging

    parser = argparse.ArgumentParser(description="Time window report")
    add_log_level_argument(parser)
    args = parser.parse_args()
    configure_logging(log_level=args.log_level)

    # In library modules, just get a logger:
    import logging
    logger = logging.getLogger(__name__)
"""

import argparse
import logging
import os
from typing import Optional

# Valid log levels
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

DEFAULT_LOG_LEVEL = 'INFO'

# Environment variable name for log level
LOG_LEVEL_ENV_VAR = 'LOG_LEVEL'

# Environment variable forcing the detailed formatter
DETAILED_LOGGING_ENV_VAR = 'DETAILED_LOGGING'

# Standard format for INFO and below
STANDARD_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

# Detailed format for ERROR and above
DETAILED_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(funcName)s:%(lineno)d - %(message)s'


def get_log_level(cli_level: Optional[str] = None) -> int:
    """
    Determine the log level from CLI argument or environment variable.

    Args:
        cli_level: Log level specified via command-line argument.

    Returns:
        The logging level as an integer constant (e.g., logging.DEBUG).

    Raises:
        ValueError: If an invalid log level is specified.
    """
    level_str = cli_level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    level_str = level_str.strip().upper()

    if level_str not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: '{level_str}'. "
            f"Valid levels are: {', '.join(VALID_LOG_LEVELS)}"
        )

    return getattr(logging, level_str)


class DetailedErrorFormatter(logging.Formatter):
    """Formatter that adds function name and line number for ERROR and above."""

    def __init__(
        self,
        standard_fmt: str = STANDARD_LOG_FORMAT,
        detailed_fmt: str = DETAILED_LOG_FORMAT,
        datefmt: Optional[str] = None
    ):
        super().__init__(fmt=standard_fmt, datefmt=datefmt)
        self._standard = logging.Formatter(standard_fmt, datefmt=datefmt)
        self._detailed = logging.Formatter(detailed_fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno >= logging.ERROR:
            return self._detailed.format(record)
        return self._standard.format(record)


def configure_logging(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
    use_detailed_formatter: Optional[bool] = None
) -> logging.Logger:
    """
    Configure the root logger with a console handler and an optional file handler.

    Args:
        log_file: Optional path to a log file. If None, only console logging.
        log_level: Optional log level from the CLI. If None, checks the
            environment variable or uses the default.
        use_detailed_formatter: Use DetailedErrorFormatter. If None, enabled
            unless DETAILED_LOGGING is set to "false".

    Returns:
        The configured root logger.
    """
    level = get_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if use_detailed_formatter is None:
        use_detailed_formatter = os.getenv(DETAILED_LOGGING_ENV_VAR, 'true').lower() != 'false'

    if use_detailed_formatter:
        formatter: logging.Formatter = DetailedErrorFormatter()
    else:
        formatter = logging.Formatter(STANDARD_LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    source = "command-line" if log_level else (
        "environment variable" if os.getenv(LOG_LEVEL_ENV_VAR) else "default"
    )
    logging.debug(f"Logging configured: level={logging.getLevelName(level)} (from {source})")

    return root_logger


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add the standard --log-level argument to an ArgumentParser."""
    parser.add_argument(
        '--log-level',
        type=str,
        choices=VALID_LOG_LEVELS,
        default=None,
        metavar='LEVEL',
        help=(
            f"Set logging verbosity level. "
            f"Choices: {', '.join(VALID_LOG_LEVELS)}. "
            f"Can also be set via {LOG_LEVEL_ENV_VAR} environment variable. "
            f"Default: {DEFAULT_LOG_LEVEL}"
        )
    )
