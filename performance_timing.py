"""
Performance timing utilities for the time window filter.

Measures and logs how long window recomputation and series loading take, so
slow selections can be spotted in the logs.

Usage:
    from performance_timing import timed_operation

    with timed_operation("window_recompute", option="last_quarter"):
        points = window_for(option, series, interval)

Log Output Format:
    PERF: [operation_name] completed in 1.2ms {metadata}
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

# Logger for performance timing messages
logger = logging.getLogger(__name__)


@dataclass
class TimingResult:
    """Result of a timed operation with metadata."""
    operation: str
    duration_seconds: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)


@contextmanager
def timed_operation(
    operation: str,
    log_level: int = logging.INFO,
    **metadata: Any
) -> Iterator[TimingResult]:
    """
    Context manager for timing a block of code.

    Args:
        operation: Name of the operation (used in log messages).
        log_level: Logging level for timing messages (default: INFO).
        **metadata: Additional key-value pairs to include in log output.

    Yields:
        TimingResult whose duration is filled in when the block exits.
    """
    result = TimingResult(operation=operation, metadata=metadata)
    start = time.perf_counter()
    try:
        yield result
    finally:
        result.duration_seconds = time.perf_counter() - start
        log_timing(operation, result.duration_seconds, log_level, **metadata)


def log_timing(
    operation: str,
    duration_seconds: float,
    log_level: int = logging.INFO,
    **metadata: Any
) -> None:
    """Log a timing measurement directly."""
    if not logger.isEnabledFor(log_level):
        return
    meta_str = _format_metadata(metadata) if metadata else ""
    logger.log(
        log_level,
        f"PERF: [{operation}] completed in {_format_duration(duration_seconds)}{meta_str}"
    )


def _format_duration(seconds: float) -> str:
    """Format duration for log display."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"


def _format_metadata(metadata: Dict[str, Any]) -> str:
    """Format metadata dictionary for log display."""
    if not metadata:
        return ""
    items = [f"{k}={v}" for k, v in metadata.items()]
    return " {" + ", ".join(items) + "}"
