"""Unit tests for argument validation helpers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from genesyscloud.data.core import errors
from genesyscloud.data.core.validation import (
    ensure_aware,
    is_integer,
    validate_days_per_job,
    validate_interval,
    validate_page_size,
    validate_region,
    validate_uuid,
)


class TestIntegers:
    """Test integer checks."""

    def test_bool_is_not_an_integer(self):
        """Test bools are rejected even though they subclass int."""
        assert is_integer(3)
        assert not is_integer(True)
        assert not is_integer(3.0)

    @pytest.mark.parametrize("value", ["10", 10.0, None, True])
    def test_page_size_type(self, value):
        """Test non-integer page sizes raise PageSizeTypeInvalidError."""
        with pytest.raises(errors.PageSizeTypeInvalidError):
            validate_page_size(value)

    @pytest.mark.parametrize("value", [0, -1])
    def test_page_size_bounds(self, value):
        """Test page sizes lower than 1 raise PageSizeOutOfBoundsError."""
        with pytest.raises(errors.PageSizeOutOfBoundsError):
            validate_page_size(value)

    def test_days_per_job(self):
        """Test days per job validation."""
        assert validate_days_per_job(1) == 1
        with pytest.raises(errors.DaysPerJobTypeInvalidError):
            validate_days_per_job(1.5)
        with pytest.raises(errors.DaysPerJobOutOfBoundsError):
            validate_days_per_job(0)


class TestStrings:
    """Test UUID and region checks."""

    def test_uuid(self):
        """Test UUID validation distinguishes type and format errors."""
        value = "0f8fad5b-d9cb-469f-a165-70867728950e"
        assert validate_uuid(value, errors.QueueIdTypeInvalidError, errors.QueueIdInvalidUUIDError)
        with pytest.raises(errors.QueueIdTypeInvalidError):
            validate_uuid(42, errors.QueueIdTypeInvalidError, errors.QueueIdInvalidUUIDError)
        with pytest.raises(errors.QueueIdInvalidUUIDError):
            validate_uuid("queue", errors.QueueIdTypeInvalidError, errors.QueueIdInvalidUUIDError)

    def test_region(self):
        """Test only supported regions are accepted."""
        assert validate_region("me-central-1") == "me-central-1"
        with pytest.raises(errors.RegionTypeInvalidError):
            validate_region(None)
        with pytest.raises(errors.RegionInvalidError):
            validate_region("us-east-9")


class TestInterval:
    """Test timestamp interval checks."""

    def test_naive_datetimes_are_utc(self):
        """Test naive datetimes are interpreted as UTC."""
        assert ensure_aware(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=UTC)

    def test_valid_interval(self):
        """Test a valid interval is returned timezone-aware."""
        start, end = validate_interval(datetime(2024, 1, 1), datetime(2024, 1, 2, tzinfo=UTC))
        assert start.tzinfo is not None
        assert end - start == timedelta(days=1)

    def test_type_errors(self):
        """Test non-datetime bounds raise the matching error."""
        with pytest.raises(errors.StartTimestampTypeInvalidError):
            validate_interval("2024-01-01", datetime(2024, 1, 2))
        with pytest.raises(errors.EndTimestampTypeInvalidError):
            validate_interval(datetime(2024, 1, 1), 1704153600)

    def test_mismatch(self):
        """Test start must be strictly earlier than end, across time zones."""
        start = datetime(2024, 1, 1, 2, tzinfo=timezone(timedelta(hours=2)))
        end = datetime(2024, 1, 1, tzinfo=UTC)
        with pytest.raises(errors.IntervalMismatchError):
            validate_interval(start, end)
