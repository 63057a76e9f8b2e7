"""Interval planning logic for determining chunk windows.

This module provides the IntervalPlanner class that splits a requested
``[start, end)`` range into consecutive chunks no longer than the policy span.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from ...core.validation import validate_interval
from .definitions import IntervalChunk, IntervalPolicy
from .telemetry import log_chunk_plan


class IntervalPlanner:
    """Plans chunk windows for bulk export jobs and audit queries.

    Chunks advance monotonically, never overlap and cover the requested range
    exactly once. Only the last chunk may be shorter than the span.
    """

    def __init__(self, policy: IntervalPolicy, *, resource: str = "unknown") -> None:
        """Initialize interval planner.

        Args:
            policy: Chunking policy for the resource
            resource: Resource name used in telemetry
        """
        if policy.span.total_seconds() <= 0:
            raise ValueError("IntervalPolicy span must be positive")
        self._policy = policy
        self._resource = resource

    def iter_chunks(self, start: datetime, end: datetime) -> Iterator[IntervalChunk]:
        """Lazily yield the chunks covering ``[start, end)``.

        Raises:
            StartTimestampTypeInvalidError: If start is not a datetime
            EndTimestampTypeInvalidError: If end is not a datetime
            IntervalMismatchError: If start is not earlier than end
        """
        start, end = validate_interval(start, end)
        span = self._policy.span

        current_start = start
        index = 0
        while current_start < end:
            current_end = current_start + min(span, end - current_start)
            yield IntervalChunk(start=current_start, end=current_end, index=index)
            current_start = current_end
            index += 1

    def plan(self, start: datetime, end: datetime) -> list[IntervalChunk]:
        """Plan all chunks for ``[start, end)``.

        Args:
            start: Start of the requested range (inclusive)
            end: End of the requested range (exclusive)

        Returns:
            List of chunks in ascending time order
        """
        plans = list(self.iter_chunks(start, end))

        log_chunk_plan(
            resource=self._resource,
            total_chunks=len(plans),
            span_seconds=int(self._policy.span.total_seconds()),
            start_time=plans[0].start,
            end_time=plans[-1].end,
        )

        return plans
