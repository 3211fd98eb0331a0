"""
Tests for step units.

This module tests StepUnit construction, validation, durations and the
advance operation.
"""

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from src.range_time.exceptions import ErrorCategory, InvalidStepError
from src.range_time.step import StepKind, StepUnit, advance, duration_of


class TestStepConstruction:
    """Test StepUnit constructors and eager validation."""

    def test_named_constructors_set_kind_and_magnitude(self) -> None:
        """Test that each named constructor produces the matching kind."""
        test_cases = [
            (StepUnit.seconds(5), StepKind.SECONDS),
            (StepUnit.minutes(5), StepKind.MINUTES),
            (StepUnit.hours(5), StepKind.HOURS),
            (StepUnit.days(5), StepKind.DAYS),
        ]

        for step, expected_kind in test_cases:
            assert step.kind is expected_kind
            assert step.magnitude == 5
            assert step.base is None

    @pytest.mark.parametrize("magnitude", [0, -1, -60])
    def test_non_positive_magnitude_fails_at_construction(self, magnitude: int) -> None:
        """Test that a non-positive magnitude fails immediately."""
        with pytest.raises(InvalidStepError, match="must be positive"):
            _ = StepUnit.minutes(magnitude)

    def test_zero_magnitude_fails_for_every_kind(self) -> None:
        """Test that magnitude 0 is rejected whatever the unit."""
        for constructor in (StepUnit.seconds, StepUnit.minutes, StepUnit.hours, StepUnit.days):
            with pytest.raises(InvalidStepError):
                _ = constructor(0)

    @pytest.mark.parametrize("magnitude", [True, 1.5, "2"])
    def test_non_integer_magnitude_is_rejected(self, magnitude: object) -> None:
        """Test that bools, floats and strings are not accepted as magnitudes."""
        with pytest.raises(InvalidStepError, match="must be an integer"):
            _ = StepUnit(StepKind.HOURS, magnitude)  # pyright: ignore[reportArgumentType]

    def test_invalid_step_error_is_categorized(self) -> None:
        """Test that step errors carry the step category and context."""
        with pytest.raises(InvalidStepError) as exc_info:
            _ = StepUnit.days(0)

        assert exc_info.value.category is ErrorCategory.STEP
        assert exc_info.value.context == {"kind": "days", "magnitude": 0}
        assert exc_info.value.recoverable is True

    def test_custom_step_requires_base(self) -> None:
        """Test that a custom step without a base duration is rejected."""
        with pytest.raises(InvalidStepError, match="requires a base duration"):
            _ = StepUnit(StepKind.CUSTOM, 1)

    @pytest.mark.parametrize("base", [timedelta(0), timedelta(seconds=-1)])
    def test_custom_step_requires_positive_base(self, base: timedelta) -> None:
        """Test that zero or negative custom durations are rejected."""
        with pytest.raises(InvalidStepError, match="base must be positive"):
            _ = StepUnit.custom(base)

    def test_custom_step_requires_timedelta_base(self) -> None:
        """Test that a custom base must be a timedelta."""
        with pytest.raises(InvalidStepError, match="must be a timedelta"):
            _ = StepUnit(StepKind.CUSTOM, 1, 90)  # pyright: ignore[reportArgumentType]

    def test_oversized_step_fails_at_construction(self) -> None:
        """Test that a step too large for a timedelta is rejected immediately."""
        with pytest.raises(InvalidStepError, match="out of range") as exc_info:
            _ = StepUnit.days(10**9)

        assert exc_info.value.category is ErrorCategory.STEP
        assert isinstance(exc_info.value.__cause__, OverflowError)

    def test_oversized_custom_step_fails_at_construction(self) -> None:
        """Test that an overflowing custom multiple is rejected immediately."""
        with pytest.raises(InvalidStepError, match="out of range"):
            _ = StepUnit.custom(timedelta(days=999_999_999), 2)

    def test_largest_representable_step_has_duration(self) -> None:
        """Test that the largest valid day step still reports its duration."""
        step = StepUnit.days(999_999_999)

        assert duration_of(step) == timedelta(days=999_999_999)

    def test_fixed_step_rejects_base(self) -> None:
        """Test that fixed kinds do not accept a base duration."""
        with pytest.raises(InvalidStepError, match="does not take a base"):
            _ = StepUnit(StepKind.MINUTES, 1, timedelta(seconds=30))

    def test_step_is_immutable(self) -> None:
        """Test that a constructed step cannot be modified."""
        step = StepUnit.minutes(2)

        with pytest.raises(dataclasses.FrozenInstanceError):
            step.magnitude = 3  # pyright: ignore[reportAttributeAccessIssue]

    def test_equal_steps_compare_equal(self) -> None:
        """Test that steps are values."""
        assert StepUnit.minutes(2) == StepUnit(StepKind.MINUTES, 2)
        assert StepUnit.minutes(2) != StepUnit.seconds(120)


class TestStepDuration:
    """Test fixed durations represented by steps."""

    def test_duration_of_each_kind(self) -> None:
        """Test the duration each kind maps to."""
        test_cases = [
            (StepUnit.seconds(30), timedelta(seconds=30)),
            (StepUnit.minutes(2), timedelta(seconds=120)),
            (StepUnit.hours(6), timedelta(hours=6)),
            (StepUnit.days(3), timedelta(days=3)),
            (StepUnit.custom(timedelta(minutes=15)), timedelta(minutes=15)),
            (StepUnit.custom(timedelta(minutes=15), 3), timedelta(minutes=45)),
        ]

        for step, expected in test_cases:
            assert duration_of(step) == expected, f"{step} should last {expected}"
            assert step.duration == expected

    def test_total_seconds(self) -> None:
        """Test the total step size in seconds."""
        assert StepUnit.seconds(5).total_seconds() == 5.0
        assert StepUnit.minutes(2).total_seconds() == 120.0
        assert StepUnit.hours(1).total_seconds() == 3600.0
        assert StepUnit.days(1).total_seconds() == 86400.0
        assert StepUnit.custom(timedelta(milliseconds=500), 3).total_seconds() == 1.5

    def test_string_representation(self) -> None:
        """Test human-readable step descriptions."""
        assert str(StepUnit.seconds(1)) == "1 second(s)"
        assert str(StepUnit.minutes(2)) == "2 minute(s)"
        assert str(StepUnit.hours(6)) == "6 hour(s)"
        assert str(StepUnit.days(1)) == "1 day(s)"
        assert str(StepUnit.custom(timedelta(minutes=15), 3)) == "3 x 0:15:00"


class TestAdvance:
    """Test moving an instant forward by one step."""

    def test_advance_adds_duration(self) -> None:
        """Test that advance adds exactly the step duration."""
        start = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

        result = advance(start, StepUnit.minutes(2))

        assert result == datetime(2024, 1, 1, 0, 2, tzinfo=timezone.utc)

    def test_advance_is_monotonic(self) -> None:
        """Test that advancing always moves strictly forward."""
        start = datetime(2024, 2, 28, 23, 59, 59, tzinfo=timezone.utc)
        steps = [
            StepUnit.seconds(1),
            StepUnit.minutes(1),
            StepUnit.hours(1),
            StepUnit.days(1),
            StepUnit.custom(timedelta(microseconds=1)),
        ]

        for step in steps:
            assert advance(start, step) > start

    def test_advance_keeps_offset(self) -> None:
        """Test that the result stays in the instant's own timezone."""
        plus_two = timezone(timedelta(hours=2))
        start = datetime(2024, 1, 1, 23, 0, tzinfo=plus_two)

        result = StepUnit.hours(2).advance(start)

        assert result.tzinfo is plus_two
        assert result == datetime(2024, 1, 2, 1, 0, tzinfo=plus_two)
