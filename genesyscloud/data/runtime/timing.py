"""Clock and sleep used by backoff and throttling.

Callers go through this module (``timing.sleep``, ``timing.utcnow``) so that
time can be controlled in tests.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

from ..core.validation import ensure_aware


async def sleep(seconds: float) -> None:
    await asyncio.sleep(seconds)


def utcnow() -> datetime:
    return datetime.now(UTC)


def parse_timestamp(value: str) -> datetime:
    """Parse a platform ISO 8601 timestamp into an aware datetime.

    Examples:
        >>> parse_timestamp("2024-01-01T00:00:00.000Z")
        datetime.datetime(2024, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    return ensure_aware(datetime.fromisoformat(value))
