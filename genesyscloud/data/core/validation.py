"""Argument validation helpers.

Every helper raises a specific ``DataUtilsError`` subclass and never touches
the network, so callers can run them before any request is issued.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any

from .constants import GC_REGIONS
from .exceptions import (
    ArgumentTypeError,
    ArgumentValueError,
    DaysPerJobOutOfBoundsError,
    DaysPerJobTypeInvalidError,
    EndTimestampTypeInvalidError,
    IntervalMismatchError,
    PageSizeOutOfBoundsError,
    PageSizeTypeInvalidError,
    RegionInvalidError,
    RegionTypeInvalidError,
    StartTimestampTypeInvalidError,
)

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_integer(value: Any) -> bool:
    """Return True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_positive_integer(
    value: Any,
    type_error: type[ArgumentTypeError],
    bounds_error: type[ArgumentValueError],
) -> int:
    """Check that ``value`` is an integer >= 1.

    Args:
        value: Value to check
        type_error: Raised when value is not an integer
        bounds_error: Raised when value is lower than 1

    Returns:
        The validated value
    """
    if not is_integer(value):
        raise type_error()
    if value < 1:
        raise bounds_error()
    return value


def validate_uuid(
    value: Any,
    type_error: type[ArgumentTypeError],
    format_error: type[ArgumentTypeError],
) -> str:
    """Check that ``value`` is a UUID string."""
    if not isinstance(value, str):
        raise type_error()
    if UUID_PATTERN.match(value) is None:
        raise format_error()
    return value


def validate_string(value: Any, type_error: type[ArgumentTypeError]) -> str:
    if not isinstance(value, str):
        raise type_error()
    return value


def validate_region(region: Any) -> str:
    """Check that ``region`` names a supported Genesys Cloud region."""
    if not isinstance(region, str):
        raise RegionTypeInvalidError()
    if region not in GC_REGIONS:
        raise RegionInvalidError(region)
    return region


def validate_page_size(page_size: Any) -> int:
    return validate_positive_integer(page_size, PageSizeTypeInvalidError, PageSizeOutOfBoundsError)


def validate_days_per_job(days_per_job: Any) -> int:
    return validate_positive_integer(
        days_per_job, DaysPerJobTypeInvalidError, DaysPerJobOutOfBoundsError
    )


def ensure_aware(timestamp: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=UTC)
    return timestamp


def validate_interval(start: Any, end: Any) -> tuple[datetime, datetime]:
    """Check a ``[start, end)`` pair of timestamps.

    Args:
        start: Start of the interval (inclusive)
        end: End of the interval (exclusive)

    Returns:
        Both timestamps, timezone-aware

    Raises:
        StartTimestampTypeInvalidError: If start is not a datetime
        EndTimestampTypeInvalidError: If end is not a datetime
        IntervalMismatchError: If start is not earlier than end
    """
    if not isinstance(start, datetime):
        raise StartTimestampTypeInvalidError()
    if not isinstance(end, datetime):
        raise EndTimestampTypeInvalidError()

    start, end = ensure_aware(start), ensure_aware(end)
    if start >= end:
        raise IntervalMismatchError()
    return start, end
