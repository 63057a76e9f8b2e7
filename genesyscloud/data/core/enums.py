"""Closed enumerations shared across the library.

Key Types:
    - LifecycleState: Client connection lifecycle, with its transition table
    - ExportJobState: Status vocabulary of analytics details jobs
    - AuditQueryState: Status vocabulary of audit log queries
    - JobOutcome: Normalized classification of a job/query status
"""

from __future__ import annotations

from enum import Enum


class LifecycleState(str, Enum):
    """Lifecycle state of a data utilities client."""

    CREATED = "CREATED"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    CLOSING = "CLOSING"
    CLOSED = "CLOSED"
    FAILED = "FAILED"


# None is the state before construction completes.
LIFECYCLE_TRANSITIONS: dict[LifecycleState | None, frozenset[LifecycleState]] = {
    None: frozenset({LifecycleState.CREATED}),
    LifecycleState.CREATED: frozenset({LifecycleState.CONNECTING}),
    LifecycleState.CONNECTING: frozenset({LifecycleState.CONNECTED, LifecycleState.FAILED}),
    LifecycleState.CONNECTED: frozenset({LifecycleState.CLOSING}),
    LifecycleState.CLOSING: frozenset({LifecycleState.CLOSED, LifecycleState.FAILED}),
    LifecycleState.CLOSED: frozenset(),
    LifecycleState.FAILED: frozenset(),
}


class JobOutcome(str, Enum):
    """Classification of a polled job or query status."""

    SUCCEEDED = "succeeded"
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class ExportJobState(str, Enum):
    """States reported by conversations/users details jobs."""

    QUEUED = "QUEUED"
    PENDING = "PENDING"
    FULFILLED = "FULFILLED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"


class AuditQueryState(str, Enum):
    """States reported by audit log queries."""

    QUEUED = "Queued"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELLED = "Cancelled"


EXPORT_JOB_OUTCOMES: dict[str, JobOutcome] = {
    ExportJobState.FULFILLED.value: JobOutcome.SUCCEEDED,
    ExportJobState.QUEUED.value: JobOutcome.IN_PROGRESS,
    ExportJobState.PENDING.value: JobOutcome.IN_PROGRESS,
    ExportJobState.FAILED.value: JobOutcome.FAILED,
    ExportJobState.CANCELLED.value: JobOutcome.CANCELLED,
    ExportJobState.EXPIRED.value: JobOutcome.EXPIRED,
}

AUDIT_QUERY_OUTCOMES: dict[str, JobOutcome] = {
    AuditQueryState.SUCCEEDED.value: JobOutcome.SUCCEEDED,
    AuditQueryState.QUEUED.value: JobOutcome.IN_PROGRESS,
    AuditQueryState.RUNNING.value: JobOutcome.IN_PROGRESS,
    AuditQueryState.FAILED.value: JobOutcome.FAILED,
    AuditQueryState.CANCELLED.value: JobOutcome.CANCELLED,
}
