"""Data models."""

from .events import StateChangeEvent
from .jobs import JobHandle, JobKind
from .responses import (
    AuditQueryResultsResponse,
    AuditQuerySubmissionResponse,
    ConversationsJobResultsResponse,
    DataAvailabilityResponse,
    EntityListingResponse,
    JobStatusResponse,
    JobSubmissionResponse,
    QueueMemberListingResponse,
    QueueRecord,
    ResponseModel,
    UsersJobResultsResponse,
)

__all__ = [
    "StateChangeEvent",
    "JobHandle",
    "JobKind",
    "ResponseModel",
    "EntityListingResponse",
    "QueueMemberListingResponse",
    "QueueRecord",
    "DataAvailabilityResponse",
    "JobSubmissionResponse",
    "JobStatusResponse",
    "ConversationsJobResultsResponse",
    "UsersJobResultsResponse",
    "AuditQuerySubmissionResponse",
    "AuditQueryResultsResponse",
]
