"""Configuration schema for declaring time ranges using Pydantic models."""

from datetime import timedelta
from typing import Annotated, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, Strict, model_validator

from .builder import TimeRangeBuilder
from .exceptions import InvalidStepError
from .range import TimeRange
from .step import StepKind, StepUnit

# Already-constructed datetimes only; text timestamps are not parsed
StrictAwareDatetime = Annotated[AwareDatetime, Strict()]


class StepConfig(BaseModel):
    """Step configuration for a time range."""

    model_config = ConfigDict(frozen=True, extra="forbid")  # pyright: ignore[reportUnannotatedClassAttribute]

    unit: Literal["seconds", "minutes", "hours", "days", "custom"] = Field(
        ...,
        description="Kind of fixed increment",
    )
    magnitude: Annotated[int, Field(gt=0)] = Field(
        default=1,
        description="Number of units per step",
    )
    custom_seconds: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Base duration in seconds, only for the 'custom' unit",
    )

    @model_validator(mode="after")
    def validate_custom_seconds(self) -> "StepConfig":
        """Require custom_seconds exactly when the unit is 'custom'."""
        if self.unit == "custom" and self.custom_seconds is None:
            raise ValueError("custom_seconds is required for the 'custom' unit")
        if self.unit != "custom" and self.custom_seconds is not None:
            raise ValueError(f"custom_seconds is not allowed for the '{self.unit}' unit")
        # Catches sub-microsecond bases rounding to zero and overflowing totals
        try:
            _ = self.to_step_unit()
        except (InvalidStepError, OverflowError) as e:
            raise ValueError(f"step is not representable: {e}") from e
        return self

    def to_step_unit(self) -> StepUnit:
        """Convert the configuration into a StepUnit."""
        kind = StepKind(self.unit)
        if kind is StepKind.CUSTOM:
            assert self.custom_seconds is not None
            return StepUnit.custom(timedelta(seconds=self.custom_seconds), self.magnitude)
        return StepUnit(kind, self.magnitude)


class TimeRangeConfig(BaseModel):
    """Declarative time range configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")  # pyright: ignore[reportUnannotatedClassAttribute]

    start: StrictAwareDatetime = Field(
        ...,
        description="First instant of the range (timezone-aware)",
    )
    end: StrictAwareDatetime = Field(
        ...,
        description="Last instant of the range, inclusive (timezone-aware)",
    )
    step: StepConfig
    skip_weekends: bool = Field(
        default=False,
        description="Whether to skip instants falling on Saturday or Sunday",
    )

    def to_builder(self) -> TimeRangeBuilder:
        """Create a builder pre-populated from this configuration."""
        return (
            TimeRangeBuilder()
            .start(self.start)
            .end(self.end)
            .step(self.step.to_step_unit())
            .skip_weekends(self.skip_weekends)
        )

    def build(self) -> TimeRange:
        """
        Build the configured TimeRange.

        Raises:
            InvalidRangeError: If start is after end
        """
        return self.to_builder().build()


def load_time_range_config(data: dict[str, object]) -> TimeRangeConfig:
    """
    Validate a mapping into a TimeRangeConfig.

    Args:
        data: Mapping with ``start``, ``end``, ``step`` and optional ``skip_weekends``

    Returns:
        TimeRangeConfig: Validated configuration object

    Raises:
        ValidationError: If the mapping fails Pydantic validation
    """
    return TimeRangeConfig.model_validate(data)

