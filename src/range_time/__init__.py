"""
range-time - iterate over timezone-aware instants between two bounds.

Build a range with TimeRangeBuilder and iterate it:

    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> utc = ZoneInfo("UTC")
    >>> time_range = (
    ...     TimeRangeBuilder()
    ...     .start(datetime(2024, 1, 1, tzinfo=utc))
    ...     .end(datetime(2024, 1, 2, tzinfo=utc))
    ...     .step(StepUnit.hours(6))
    ...     .build()
    ... )
    >>> [t.hour for t in time_range]
    [0, 6, 12, 18, 0]
"""

from .builder import TimeRangeBuilder
from .config import StepConfig, TimeRangeConfig, load_time_range_config
from .exceptions import (
    BuildError,
    ErrorCategory,
    InvalidInstantError,
    InvalidRangeError,
    InvalidStepError,
    MissingFieldError,
    RangeTimeError,
)
from .range import TimeRange, TimeRangeIterator, is_weekend
from .step import StepKind, StepUnit, advance, duration_of

__version__ = "0.2.0"

__all__ = [
    "TimeRangeBuilder",
    "TimeRange",
    "TimeRangeIterator",
    "is_weekend",
    "StepKind",
    "StepUnit",
    "advance",
    "duration_of",
    "StepConfig",
    "TimeRangeConfig",
    "load_time_range_config",
    "RangeTimeError",
    "BuildError",
    "ErrorCategory",
    "InvalidStepError",
    "InvalidRangeError",
    "MissingFieldError",
    "InvalidInstantError",
]
