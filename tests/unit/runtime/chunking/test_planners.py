"""Unit tests for interval planning logic."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from genesyscloud.data.core import errors
from genesyscloud.data.runtime.chunking import (
    IntervalChunk,
    IntervalPlanner,
    IntervalPolicy,
    format_timestamp,
)


class TestIntervalPlanner:
    """Test IntervalPlanner functionality."""

    def test_plan_splits_into_spans(self):
        """Test a 65-day range splits into 30 + 30 + 5 days."""
        planner = IntervalPlanner(IntervalPolicy.days(30))
        start = datetime(2024, 1, 1, tzinfo=UTC)
        end = start + timedelta(days=65)

        plans = planner.plan(start, end)

        assert [plan.duration for plan in plans] == [
            timedelta(days=30),
            timedelta(days=30),
            timedelta(days=5),
        ]
        assert [plan.index for plan in plans] == [0, 1, 2]

    def test_plan_95_days_in_30_day_spans(self):
        """Test days 0-95 split into four chunks, the last one short."""
        planner = IntervalPlanner(IntervalPolicy.days(30))
        day0 = datetime(2024, 1, 1, tzinfo=UTC)

        plans = planner.plan(day0, day0 + timedelta(days=95))

        assert [((p.start - day0).days, (p.end - day0).days) for p in plans] == [
            (0, 30),
            (30, 60),
            (60, 90),
            (90, 95),
        ]

    def test_plan_huge_span_is_clamped(self):
        """Test a span far beyond the datetime range yields one chunk ending at end."""
        planner = IntervalPlanner(IntervalPolicy.days(3_000_000))
        start = datetime(2024, 1, 1, tzinfo=UTC)
        end = start + timedelta(days=10)

        plans = planner.plan(start, end)

        assert plans == [IntervalChunk(start=start, end=end, index=0)]

    def test_plan_covers_range_exactly_once(self):
        """Test chunks are contiguous, non-overlapping and cover the range."""
        planner = IntervalPlanner(IntervalPolicy.days(7))
        start = datetime(2024, 2, 1, 13, 30, tzinfo=UTC)
        end = datetime(2024, 3, 9, 8, tzinfo=UTC)

        plans = planner.plan(start, end)

        assert plans[0].start == start
        assert plans[-1].end == end
        for previous, current in zip(plans, plans[1:]):
            assert previous.end == current.start
            assert previous.start < previous.end

    def test_plan_exact_multiple(self):
        """Test a range of exactly two spans yields two chunks."""
        planner = IntervalPlanner(IntervalPolicy.days(30))
        start = datetime(2024, 1, 1, tzinfo=UTC)

        plans = planner.plan(start, start + timedelta(days=60))

        assert len(plans) == 2

    def test_plan_shorter_than_span(self):
        """Test a short range yields a single chunk."""
        planner = IntervalPlanner(IntervalPolicy.days(30))
        start = datetime(2024, 1, 1, tzinfo=UTC)
        end = start + timedelta(hours=1)

        assert planner.plan(start, end) == [IntervalChunk(start=start, end=end, index=0)]

    def test_plan_rejects_inverted_range(self):
        """Test start must precede end."""
        planner = IntervalPlanner(IntervalPolicy.days(30))
        moment = datetime(2024, 1, 1, tzinfo=UTC)

        with pytest.raises(errors.IntervalMismatchError):
            planner.plan(moment, moment)

    def test_plan_rejects_non_datetimes(self):
        """Test bounds must be datetimes."""
        planner = IntervalPlanner(IntervalPolicy.days(30))

        with pytest.raises(errors.StartTimestampTypeInvalidError):
            planner.plan("2024-01-01", datetime(2024, 1, 2))

    def test_policy_span_must_be_positive(self):
        """Test zero-length spans are rejected."""
        with pytest.raises(ValueError, match="span must be positive"):
            IntervalPlanner(IntervalPolicy(span=timedelta(0)))

    def test_iter_chunks_is_lazy(self):
        """Test chunks can be consumed one at a time."""
        planner = IntervalPlanner(IntervalPolicy.days(1))
        start = datetime(2024, 1, 1, tzinfo=UTC)
        chunks = planner.iter_chunks(start, start + timedelta(days=1000))

        first = next(chunks)

        assert first.end == start + timedelta(days=1)


class TestIntervalFormatting:
    """Test platform interval strings."""

    def test_to_interval(self):
        """Test chunk interval strings use millisecond UTC timestamps."""
        chunk = IntervalChunk(
            start=datetime(2024, 1, 1, tzinfo=UTC),
            end=datetime(2024, 1, 31, tzinfo=UTC),
        )
        assert chunk.to_interval() == "2024-01-01T00:00:00.000Z/2024-01-31T00:00:00.000Z"

    def test_format_truncates_to_milliseconds(self):
        """Test sub-millisecond precision is dropped."""
        moment = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)
        assert format_timestamp(moment) == "2024-05-06T07:08:09.123Z"

    def test_format_converts_to_utc(self):
        """Test offsets are converted to UTC."""
        moment = datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(moment) == "2024-01-01T00:00:00.000Z"
