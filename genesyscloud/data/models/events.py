"""Lifecycle notification events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class StateChangeEvent:
    """Emitted on every lifecycle state change.

    Attributes:
        previous_state: Name of the previous state (None for the first transition)
        new_state: Name of the new state
        timestamp: When the change happened (UTC)
    """

    previous_state: str | None
    new_state: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
