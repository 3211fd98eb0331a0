"""
Builder for TimeRange values.

Fields are collected through chainable setters and validated together in
``build()``. The builder is not consumed by ``build()``, so one builder can
produce several ranges that differ in a single field.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Self

from .exceptions import BuildError, MissingFieldError
from .range import Predicate, TimeRange
from .step import StepUnit

logger = logging.getLogger(__name__)


class TimeRangeBuilder:
    """
    A builder to create TimeRange values.

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> utc = ZoneInfo("UTC")
        >>> time_range = (
        ...     TimeRangeBuilder()
        ...     .start(datetime(2024, 1, 1, 0, 0, tzinfo=utc))
        ...     .end(datetime(2024, 1, 1, 0, 10, tzinfo=utc))
        ...     .step(StepUnit.minutes(2))
        ...     .build()
        ... )
        >>> time_range.total_steps()
        6
    """

    def __init__(self) -> None:
        """Create a builder with every field unset."""
        self._start: datetime | None = None
        self._end: datetime | None = None
        self._step: StepUnit | None = None
        self._skip_weekends: bool = False
        self._predicate: Predicate | None = None

    def start(self, start: datetime) -> Self:
        """Set the start time."""
        self._start = start
        return self

    def end(self, end: datetime) -> Self:
        """Set the end time."""
        self._end = end
        return self

    def step(self, step: StepUnit) -> Self:
        """Set the step."""
        self._step = step
        return self

    def skip_weekends(self, skip: bool = True) -> Self:
        """Whether to skip instants falling on Saturday or Sunday."""
        self._skip_weekends = skip
        return self

    def filter(self, predicate: Predicate | None) -> Self:
        """
        Provide a predicate selecting which instants are produced.

        Instants for which the predicate returns False are skipped, which can
        be used to drop holidays or other specific times. Passing None clears
        a previously set predicate.
        """
        self._predicate = predicate
        return self

    def build(self) -> TimeRange:
        """
        Validate the collected fields and build the TimeRange.

        Returns:
            An immutable TimeRange

        Raises:
            MissingFieldError: If start, end or step was never set
            InvalidStepError: If the step duration is not positive
            InvalidInstantError: If start or end is not timezone-aware
            InvalidRangeError: If start is after end
        """
        try:
            time_range = self._validate()
        except BuildError as e:
            logger.debug(f"Rejected time range: {e}")
            raise

        logger.debug(f"Built time range {time_range}")
        return time_range

    def _validate(self) -> TimeRange:
        if self._start is None:
            raise MissingFieldError("start")
        if self._end is None:
            raise MissingFieldError("end")
        if self._step is None:
            raise MissingFieldError("step")

        return TimeRange(
            start=self._start,
            end=self._end,
            step=self._step,
            skip_weekends=self._skip_weekends,
            predicate=self._predicate,
        )
