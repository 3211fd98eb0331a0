"""
Timezone handling utilities for range-time.

Instants handed to the library must already be timezone-aware. Arithmetic is
anchored on the UTC timeline so that adding a step always moves an instant by
exactly the step's elapsed duration, whatever the zone's DST rules are.
"""

from datetime import datetime, timedelta, timezone

from .exceptions import InvalidInstantError


def is_timezone_aware(dt: datetime) -> bool:
    """
    Check whether a datetime carries usable timezone information.

    Args:
        dt: Datetime object that may be naive or timezone-aware

    Returns:
        True if the datetime has a tzinfo with a defined UTC offset

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> is_timezone_aware(datetime(2024, 1, 1, tzinfo=ZoneInfo("UTC")))
        True
        >>> is_timezone_aware(datetime(2024, 1, 1))
        False
    """
    return dt.tzinfo is not None and dt.utcoffset() is not None


def require_timezone_aware(dt: object, field: str) -> datetime:
    """
    Return the datetime unchanged if it is timezone-aware.

    Args:
        dt: Value supplied for an instant
        field: Name of the field, used in the error

    Returns:
        The same datetime object

    Raises:
        InvalidInstantError: If the value is not a datetime, is naive, or
            cannot be converted to UTC
    """
    if not isinstance(dt, datetime):
        raise InvalidInstantError(
            field, f"{field} must be a datetime, got {type(dt).__name__}"
        )
    if not is_timezone_aware(dt):
        raise InvalidInstantError(field)
    try:
        _ = to_utc(dt)
    except OverflowError as e:
        raise InvalidInstantError(
            field, f"{field} {dt.isoformat()} is outside the representable UTC range"
        ) from e
    return dt


def to_utc(dt: datetime) -> datetime:
    """Convert a timezone-aware datetime to UTC."""
    return dt.astimezone(timezone.utc)


def shift(dt: datetime, delta: timedelta) -> datetime:
    """
    Move a timezone-aware datetime by an exact elapsed duration.

    The addition happens in UTC and the result is converted back into the
    original tzinfo, so the output stays in the caller's zone.

    Args:
        dt: Timezone-aware datetime
        delta: Elapsed duration to add

    Returns:
        Datetime in ``dt``'s tzinfo, exactly ``delta`` later on the UTC timeline

    Examples:
        >>> from zoneinfo import ZoneInfo
        >>> tz = ZoneInfo("Europe/Berlin")
        >>> before = datetime(2024, 3, 31, 1, 30, tzinfo=tz)
        >>> shift(before, timedelta(hours=1)).hour
        3
    """
    return (to_utc(dt) + delta).astimezone(dt.tzinfo)
