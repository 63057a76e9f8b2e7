"""Job and query tracking models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..runtime.chunking.definitions import IntervalChunk


class JobKind(str, Enum):
    """Asynchronous bulk resources driven by the job orchestrator."""

    CONVERSATIONS_DETAILS = "conversationsDetails"
    USERS_DETAILS = "usersDetails"
    AUDIT_LOG_QUERY = "auditLogQuery"


@dataclass
class JobHandle:
    """A submitted export job or audit query.

    One handle is created per interval chunk and is never reused.

    Attributes:
        id: Platform identifier (``jobId`` or audit transaction ``id``)
        kind: Resource the job belongs to
        chunk: Interval the job covers
        state: Last observed platform state (None until first known)
        submitted_at: Server-reported start time when available, else local time
        polls: Number of status polls issued so far
    """

    id: str
    kind: JobKind
    chunk: IntervalChunk
    state: str | None = None
    submitted_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    polls: int = 0
