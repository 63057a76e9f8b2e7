"""Interval chunk definitions.

This module defines the data structures describing how a requested time
range is split into sub-intervals the platform accepts in a single job or
query.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from ...core.validation import ensure_aware


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp as ISO 8601 UTC with millisecond precision.

    Examples:
        >>> format_timestamp(datetime(2024, 1, 1, tzinfo=UTC))
        '2024-01-01T00:00:00.000Z'
    """
    utc = ensure_aware(timestamp).astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class IntervalPolicy:
    """Chunking policy for a bulk resource.

    Attributes:
        span: Maximum length of a single chunk
    """

    span: timedelta

    @classmethod
    def days(cls, days: int) -> IntervalPolicy:
        return cls(span=timedelta(days=days))


@dataclass(frozen=True)
class IntervalChunk:
    """A ``[start, end)`` sub-range of a requested interval.

    Attributes:
        start: Chunk start (inclusive)
        end: Chunk end (exclusive)
        index: Zero-based position of this chunk in the plan
    """

    start: datetime
    end: datetime
    index: int = 0

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def to_interval(self) -> str:
        """Platform interval string, ``<start>/<end>``."""
        return f"{format_timestamp(self.start)}/{format_timestamp(self.end)}"
