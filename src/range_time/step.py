"""
Step units for time range iteration.

A step is a fixed elapsed duration: N seconds, minutes, hours or days, or a
multiple of a custom duration. Calendar-irregular steps (months, years) are
not representable here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from .exceptions import InvalidStepError
from .timezone import shift


class StepKind(Enum):
    """Kinds of fixed increments."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    CUSTOM = "custom"


_BASE_DURATIONS: dict[StepKind, timedelta] = {
    StepKind.SECONDS: timedelta(seconds=1),
    StepKind.MINUTES: timedelta(minutes=1),
    StepKind.HOURS: timedelta(hours=1),
    StepKind.DAYS: timedelta(days=1),
}

_LABELS: dict[StepKind, str] = {
    StepKind.SECONDS: "second(s)",
    StepKind.MINUTES: "minute(s)",
    StepKind.HOURS: "hour(s)",
    StepKind.DAYS: "day(s)",
}


@dataclass(frozen=True)
class StepUnit:
    """
    A fixed increment used to move from one produced instant to the next.

    Prefer the named constructors over calling the class directly:

        >>> StepUnit.minutes(2).duration
        datetime.timedelta(seconds=120)
        >>> str(StepUnit.hours(6))
        '6 hour(s)'

    Raises:
        InvalidStepError: If the magnitude is not a positive integer, the
            custom base duration is missing or not positive, or the total
            duration does not fit in a timedelta
    """

    kind: StepKind
    magnitude: int
    base: timedelta | None = None

    def __post_init__(self) -> None:
        """Validate the step eagerly so bad steps never reach iteration."""
        # bool is an int subclass but never a meaningful magnitude
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise InvalidStepError(
                f"step magnitude must be an integer, got {type(self.magnitude).__name__}",
                context={"kind": self.kind.value, "magnitude": self.magnitude},
            )
        if self.magnitude <= 0:
            raise InvalidStepError(
                f"step magnitude must be positive, got {self.magnitude}",
                context={"kind": self.kind.value, "magnitude": self.magnitude},
            )

        if self.kind is StepKind.CUSTOM:
            if self.base is None:
                raise InvalidStepError("custom step requires a base duration")
            if not isinstance(self.base, timedelta):
                raise InvalidStepError(
                    f"custom step base must be a timedelta, got {type(self.base).__name__}"
                )
            if self.base <= timedelta(0):
                raise InvalidStepError(
                    f"custom step base must be positive, got {self.base}",
                    context={"kind": self.kind.value, "base": self.base},
                )
        elif self.base is not None:
            raise InvalidStepError(
                f"{self.kind.value} step does not take a base duration",
                context={"kind": self.kind.value, "base": self.base},
            )

        # timedelta caps at 999999999 days; duration must never fail later
        try:
            _ = self.duration
        except OverflowError as e:
            raise InvalidStepError(
                f"step duration is out of range: {self.magnitude} x {self.kind.value}",
                context={"kind": self.kind.value, "magnitude": self.magnitude},
            ) from e

    @classmethod
    def seconds(cls, n: int) -> StepUnit:
        return cls(StepKind.SECONDS, n)

    @classmethod
    def minutes(cls, n: int) -> StepUnit:
        return cls(StepKind.MINUTES, n)

    @classmethod
    def hours(cls, n: int) -> StepUnit:
        return cls(StepKind.HOURS, n)

    @classmethod
    def days(cls, n: int) -> StepUnit:
        return cls(StepKind.DAYS, n)

    @classmethod
    def custom(cls, duration: timedelta, magnitude: int = 1) -> StepUnit:
        """Create a step of ``magnitude`` times an arbitrary fixed duration."""
        return cls(StepKind.CUSTOM, magnitude, duration)

    @property
    def duration(self) -> timedelta:
        """Fixed elapsed duration represented by this step."""
        if self.kind is StepKind.CUSTOM:
            assert self.base is not None
            return self.base * self.magnitude
        return _BASE_DURATIONS[self.kind] * self.magnitude

    def total_seconds(self) -> float:
        """Return the total step size in seconds."""
        return self.duration.total_seconds()

    def advance(self, instant: datetime) -> datetime:
        """Return the instant one step later, in the instant's own timezone."""
        return shift(instant, self.duration)

    def __str__(self) -> str:
        if self.kind is StepKind.CUSTOM:
            return f"{self.magnitude} x {self.base}"
        return f"{self.magnitude} {_LABELS[self.kind]}"


def duration_of(step: StepUnit) -> timedelta:
    """
    Get the fixed duration represented by a step.

    Examples:
        >>> duration_of(StepUnit.days(2))
        datetime.timedelta(days=2)
    """
    return step.duration


def advance(instant: datetime, step: StepUnit) -> datetime:
    """
    Advance a timezone-aware instant by one step.

    The result is always strictly later than ``instant`` because every step
    duration is positive.

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> start = datetime(2024, 1, 1, tzinfo=ZoneInfo("UTC"))
        >>> advance(start, StepUnit.minutes(2)).minute
        2
    """
    return step.advance(instant)
