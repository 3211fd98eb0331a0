"""
Global test configuration fixtures for range-time tests.

This module provides reusable pytest fixtures for instants, timezones and
pre-populated builders shared across the unit tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from src.range_time import StepUnit, TimeRangeBuilder


@pytest.fixture
def utc() -> tzinfo:
    """UTC timezone that needs no tz database."""
    return timezone.utc


@pytest.fixture
def berlin() -> ZoneInfo:
    """
    Europe/Berlin timezone, used for DST transitions.

    Skips the test when the system has no tz database entry for it.
    """
    try:
        return ZoneInfo("Europe/Berlin")
    except ZoneInfoNotFoundError:
        pytest.skip("Europe/Berlin timezone data not available")


@pytest.fixture
def midnight(utc: tzinfo) -> datetime:
    """2024-01-01T00:00:00Z, a Monday."""
    return datetime(2024, 1, 1, 0, 0, 0, tzinfo=utc)


@pytest.fixture
def ten_past(midnight: datetime) -> datetime:
    """2024-01-01T00:10:00Z."""
    return midnight + timedelta(minutes=10)


@pytest.fixture
def two_minute_builder(midnight: datetime, ten_past: datetime) -> TimeRangeBuilder:
    """Builder for 00:00 .. 00:10 every 2 minutes."""
    return TimeRangeBuilder().start(midnight).end(ten_past).step(StepUnit.minutes(2))
