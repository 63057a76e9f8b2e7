"""Genesys Cloud platform API response schemas.

This module defines strict Pydantic models for the raw responses returned by
the platform API client. Each model lists its required properties in the order
they are checked; record payloads (users, queues, conversations, audit events)
are kept as the raw mappings returned by the platform.

All properties use the platform field names through aliases.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseModel(BaseModel):
    """Base for response schemas: strict types, unknown properties kept."""

    model_config = ConfigDict(strict=True, extra="allow", populate_by_name=True)


# ----------------------
# Page-number listings
# ----------------------
class EntityListingBody(ResponseModel):
    entities: list[Any]
    page_count: int = Field(..., alias="pageCount")


class EntityListingResponse(ResponseModel):
    """Users, groups and queues listing page."""

    body: EntityListingBody


class QueueMemberListingBody(ResponseModel):
    entities: list[Any]
    # Absent on the last page
    next_uri: str = Field(None, alias="nextUri")


class QueueMemberListingResponse(ResponseModel):
    """Queue members page; continuation is signalled by ``nextUri``."""

    body: QueueMemberListingBody


class QueueRecord(ResponseModel):
    """Subset of a queue entity used to find the oldest creation date."""

    date_created: str = Field(..., alias="dateCreated")


# ----------------------
# Datalake (analytics details jobs)
# ----------------------
class DataAvailabilityBody(ResponseModel):
    data_availability_date: str = Field(..., alias="dataAvailabilityDate")


class DataAvailabilityResponse(ResponseModel):
    body: DataAvailabilityBody


class JobSubmissionBody(ResponseModel):
    job_id: str = Field(..., alias="jobId")


class JobSubmissionResponse(ResponseModel):
    body: JobSubmissionBody

    @property
    def job_id(self) -> str:
        return self.body.job_id

    @property
    def initial_state(self) -> str | None:
        return None

    @property
    def started_at(self) -> str | None:
        return None


class JobStatusBody(ResponseModel):
    state: str


class JobStatusResponse(ResponseModel):
    """Status of an export job or an audit query."""

    body: JobStatusBody


class ConversationsJobResultsBody(ResponseModel):
    conversations: list[Any]
    cursor: str = None


class ConversationsJobResultsResponse(ResponseModel):
    body: ConversationsJobResultsBody


class UsersJobResultsBody(ResponseModel):
    user_details: list[Any] = Field(..., alias="userDetails")
    cursor: str = None


class UsersJobResultsResponse(ResponseModel):
    body: UsersJobResultsBody


# ----------------------
# Audit log queries
# ----------------------
class AuditQuerySubmissionBody(ResponseModel):
    id: str
    state: str
    start_date: str = Field(..., alias="startDate")


class AuditQuerySubmissionResponse(ResponseModel):
    body: AuditQuerySubmissionBody

    @property
    def job_id(self) -> str:
        return self.body.id

    @property
    def initial_state(self) -> str | None:
        return self.body.state

    @property
    def started_at(self) -> str | None:
        return self.body.start_date


class AuditQueryResultsBody(ResponseModel):
    # Omitted by the platform when a page holds no events
    entities: list[Any] = Field(default_factory=list)
    cursor: str = None


class AuditQueryResultsResponse(ResponseModel):
    body: AuditQueryResultsBody
