"""
Exception classes for range-time.

This module contains the error taxonomy raised while constructing steps and
time ranges. Iterating a successfully built range never raises.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors for appropriate handling strategies."""

    STEP = "step"
    RANGE = "range"
    MISSING_FIELD = "missing_field"
    INSTANT = "instant"
    UNKNOWN = "unknown"


class RangeTimeError(Exception):
    """Base exception class for range-time specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        context: object | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.context: object | None = context
        self.recoverable: bool = recoverable


class BuildError(RangeTimeError):
    """Base class for failures while building a step or a time range."""


class InvalidStepError(BuildError):
    """Step magnitude or duration is not positive."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.STEP, context=context)


class InvalidRangeError(BuildError):
    """Start instant is strictly after the end instant."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message, category=ErrorCategory.RANGE, context=context)


class MissingFieldError(BuildError):
    """A required builder field was never set."""

    def __init__(self, field: str) -> None:
        super().__init__(
            f"{field} is required",
            category=ErrorCategory.MISSING_FIELD,
            context={"field": field},
        )
        self.field: str = field


class InvalidInstantError(BuildError):
    """An instant is naive (carries no timezone information)."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            message or f"{field} must be a timezone-aware datetime",
            category=ErrorCategory.INSTANT,
            context={"field": field},
        )
        self.field: str = field
