"""
Time range value and its lazy iterator.

A TimeRange is an immutable description (start, end, step and optional
exclusions). Each call to ``iter()`` derives a fresh TimeRangeIterator holding
the only mutable state, the cursor.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, final

from .exceptions import InvalidRangeError, InvalidStepError
from .step import StepUnit
from .timezone import require_timezone_aware, to_utc

if TYPE_CHECKING:
    from .builder import TimeRangeBuilder

logger = logging.getLogger(__name__)

Predicate = Callable[[datetime], bool]

# datetime.weekday(): Monday is 0, Saturday 5, Sunday 6
_SATURDAY = 5


def is_weekend(instant: datetime) -> bool:
    """Check whether an instant falls on Saturday or Sunday in its own zone."""
    return instant.weekday() >= _SATURDAY


@dataclass(frozen=True)
class TimeRange:
    """
    Range of time to iterate over, end inclusive.

    Usually created through TimeRangeBuilder; constructing it directly runs
    the same validation. Iterating yields start, then every following step
    boundary up to and including end.

    Attributes:
        start: First instant of the range
        end: Last instant that may be produced
        step: Increment between consecutive candidates
        skip_weekends: Drop instants falling on Saturday or Sunday
        predicate: Optional filter; instants for which it returns False are dropped

    Raises:
        InvalidStepError: If the step is not a StepUnit or not positive
        InvalidInstantError: If start or end is not timezone-aware
        InvalidRangeError: If start is after end
    """

    start: datetime
    end: datetime
    step: StepUnit
    skip_weekends: bool = False
    predicate: Predicate | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.step, StepUnit):
            raise InvalidStepError(
                f"step must be a StepUnit, got {type(self.step).__name__}"
            )
        # Re-checked here in case a StepUnit was constructed around validation
        if self.step.magnitude <= 0 or self.step.duration <= timedelta(0):
            raise InvalidStepError(
                f"step must be positive, got {self.step}",
                context={"step": self.step},
            )

        start = require_timezone_aware(self.start, "start")
        end = require_timezone_aware(self.end, "end")

        if to_utc(start) > to_utc(end):
            raise InvalidRangeError(
                f"start time {start.isoformat()} is after end time {end.isoformat()}",
                context={"start": start, "end": end},
            )

    def __iter__(self) -> TimeRangeIterator:
        return TimeRangeIterator(self)

    @staticmethod
    def builder() -> TimeRangeBuilder:
        """Create a new, empty builder."""
        from .builder import TimeRangeBuilder

        return TimeRangeBuilder()

    @property
    def span(self) -> timedelta:
        """Elapsed time between start and end."""
        return to_utc(self.end) - to_utc(self.start)

    @property
    def is_filtered(self) -> bool:
        """True if weekend skipping or a predicate may drop step boundaries."""
        return self.skip_weekends or self.predicate is not None

    def accepts(self, instant: datetime) -> bool:
        """Check whether a step boundary passes the range's exclusions."""
        if self.skip_weekends and is_weekend(instant):
            return False
        if self.predicate is not None and not self.predicate(instant):
            return False
        return True

    def total_steps(self) -> int:
        """
        Compute the number of instants iteration yields.

        Unfiltered ranges are counted arithmetically; ranges with weekend
        skipping or a predicate are walked.
        """
        if not self.is_filtered:
            return self.span // self.step.duration + 1
        return sum(1 for _ in self)

    def total_duration_in_seconds(self) -> float:
        """Compute the total duration in seconds of all yielded steps."""
        return self.total_steps() * self.step.total_seconds()

    def __str__(self) -> str:
        return f"{self.start.isoformat()} .. {self.end.isoformat()} every {self.step}"


@final
class TimeRangeIterator(Iterator[datetime]):
    """
    Single-pass cursor over a TimeRange.

    The iterator is either active, positioned on the next candidate instant,
    or exhausted. Exhaustion is terminal: further ``next()`` calls keep
    raising StopIteration. Not safe to share between threads.
    """

    def __init__(self, time_range: TimeRange) -> None:
        self._range: TimeRange = time_range
        # Compared on the UTC timeline; same-tzinfo comparisons ignore fold
        self._end_utc: datetime = to_utc(time_range.end)
        self._cursor: datetime | None = time_range.start

    @property
    def exhausted(self) -> bool:
        return self._cursor is None

    def __iter__(self) -> TimeRangeIterator:
        return self

    def __next__(self) -> datetime:
        while self._cursor is not None and to_utc(self._cursor) <= self._end_utc:
            candidate = self._cursor
            try:
                self._cursor = self._range.step.advance(candidate)
            except OverflowError:
                # Past the largest datetime, hence past end
                self._cursor = None
            if self._range.accepts(candidate):
                return candidate

        if self._cursor is not None:
            logger.debug(f"Time range exhausted: {self._range}")
            self._cursor = None
        raise StopIteration
