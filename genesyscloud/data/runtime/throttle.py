"""Submission throttle for rate-limited job submissions."""

from __future__ import annotations

from datetime import datetime, timedelta

from ..core.validation import ensure_aware
from . import timing
from .chunking.telemetry import log_submission_throttled


class SubmissionThrottle:
    """Keeps consecutive submissions at least ``min_interval`` apart.

    The reference time is the start time reported by the platform for the
    previous submission, recorded with ``record``. The first submission never
    waits.
    """

    def __init__(self, min_interval: timedelta, *, resource: str = "unknown") -> None:
        self._min_interval = min_interval
        self._resource = resource
        self._last_submission: datetime | None = None

    async def wait(self) -> float:
        """Suspend until the next submission is allowed.

        Returns:
            Seconds waited (0 when no wait was needed)
        """
        if self._last_submission is None:
            return 0.0

        wait = (self._last_submission + self._min_interval - timing.utcnow()).total_seconds()
        if wait <= 0:
            return 0.0

        log_submission_throttled(resource=self._resource, wait_seconds=wait)
        await timing.sleep(wait)
        return wait

    def record(self, submitted_at: datetime) -> None:
        self._last_submission = ensure_aware(submitted_at)
