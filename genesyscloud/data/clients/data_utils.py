"""High-level data utilities client for the Genesys Cloud platform.

Wraps a platform API client and exposes developer-friendly retrieval
operations for service layers:

- connect/close lifecycle with shared in-flight tasks and state-change events
- paginated listings (users, groups, queues, queue members)
- datalake availability timestamps and the oldest queue creation date
- bulk exports from the datalake (conversations details, users details)
- audit log queries

Every listing and export is a lazy async generator of record batches.
Bulk exports and audit queries split the requested range into chunks and run
one platform job per chunk, strictly one at a time.

Notes:
- Naive datetimes are interpreted as UTC.
- Closing an export generator early (``aclose()`` or breaking out of an
  ``async with contextlib.aclosing(...)`` block) deletes the running job.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime
from typing import Any

from ..core import constants
from ..core import exceptions as errors
from ..core.config import ClientOptions, Credentials
from ..core.enums import AUDIT_QUERY_OUTCOMES, EXPORT_JOB_OUTCOMES, JobOutcome, LifecycleState
from ..core.exceptions import (
    ClientIdInvalidUUIDError,
    ClientIdTypeInvalidError,
    ClientSecretTypeInvalidError,
    EntityTypeTypeInvalidError,
    IncompleteResponseError,
    InternalError,
    QueueIdInvalidUUIDError,
    QueueIdTypeInvalidError,
    ServiceNameTypeInvalidError,
    StartTimestampNoDataError,
)
from ..core.validation import (
    validate_days_per_job,
    validate_interval,
    validate_page_size,
    validate_region,
    validate_string,
    validate_uuid,
)
from ..models.jobs import JobKind
from ..models.responses import (
    AuditQueryResultsResponse,
    AuditQuerySubmissionResponse,
    ConversationsJobResultsResponse,
    DataAvailabilityResponse,
    EntityListingResponse,
    JobSubmissionResponse,
    QueueMemberListingResponse,
    QueueRecord,
    UsersJobResultsResponse,
)
from ..platform import PlatformAPIClient, PlatformClient, translate_platform_errors
from ..runtime import timing
from ..runtime.chunking import IntervalChunk, IntervalPlanner, IntervalPolicy
from ..runtime.jobs import JobBinding, JobOrchestrator
from ..runtime.lifecycle import LifecycleStateMachine, StateListener
from ..runtime.pagination import CursorPaginator, PageNumberPaginator, PageRequest
from ..runtime.throttle import SubmissionThrottle
from ..runtime.validator import parse_response_timestamp, validate_response

logger = logging.getLogger(__name__)

PlatformClientFactory = Callable[..., PlatformClient]

_QUEUE_OWNER = 'The response body "queue" property'


class GenesysCloudDataUtils:
    """Genesys Cloud data retrieval client."""

    errors = errors

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: str,
        *,
        socket_timeout: int = constants.DEFAULT_SOCKET_TIMEOUT,
        time_between_requests: int = constants.DEFAULT_TIME_BETWEEN_REQUESTS,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
        platform_client_factory: PlatformClientFactory = PlatformAPIClient,
    ) -> None:
        """Initialize the data utilities client.

        Arguments are validated before anything else happens; no network
        request is issued until ``connect``.

        Args:
            client_id: OAuth client ID (UUID)
            client_secret: OAuth client secret
            region: Genesys Cloud region (e.g. "us-east-1")
            socket_timeout: HTTP socket timeout in milliseconds
            time_between_requests: Minimum spacing between API calls in milliseconds
            max_retries: Maximum retries for retryable API errors
            platform_client_factory: Callable building the platform API client

        Raises:
            ArgumentTypeError: If an argument has the wrong type
            ArgumentValueError: If an argument is out of bounds
            InternalError: If the platform API client cannot be created
        """
        validate_uuid(client_id, ClientIdTypeInvalidError, ClientIdInvalidUUIDError)
        validate_string(client_secret, ClientSecretTypeInvalidError)
        validate_region(region)
        self._options = ClientOptions(
            socket_timeout=socket_timeout,
            time_between_requests=time_between_requests,
            max_retries=max_retries,
        )
        self._region = region

        try:
            self._client: PlatformClient = platform_client_factory(
                client_id,
                client_secret,
                region,
                socket_timeout=self._options.socket_timeout,
                time_between_requests=self._options.time_between_requests,
                max_retries=self._options.max_retries,
            )
        except Exception as e:
            raise InternalError(str(e), e) from e

        self._lifecycle = LifecycleStateMachine(name=f"genesyscloud:{region}")
        self._audit_throttle = SubmissionThrottle(
            constants.AUDIT_LOG_QUERY_INTERVAL, resource=JobKind.AUDIT_LOG_QUERY.value
        )
        self._lifecycle.transition(LifecycleState.CREATED)

    @classmethod
    def from_env(cls, **options: Any) -> GenesysCloudDataUtils:
        """Create a client from ``GENESYS_CLOUD_*`` environment variables.

        Args:
            **options: Keyword options forwarded to the constructor

        Raises:
            EnvironmentVariablesMissingError: If a credential variable is not set
        """
        credentials = Credentials.from_env()
        return cls(credentials.client_id, credentials.client_secret, credentials.region, **options)

    # ----------------------
    # Lifecycle
    # ----------------------
    @property
    def state(self) -> LifecycleState | None:
        return self._lifecycle.state

    @property
    def region(self) -> str:
        return self._region

    @property
    def options(self) -> ClientOptions:
        return self._options

    def connect(self) -> Awaitable[bool]:
        """Connect to the platform.

        Calling again while a connection is in progress returns the same
        awaitable.

        Returns:
            Awaitable resolving to True once connected

        Raises:
            ConnectUnavailableError: If the client was already connected or closed
        """
        return self._lifecycle.begin_connect(self._connect_client)

    def close(self) -> Awaitable[bool]:
        """Close the connection and release the platform API client.

        Calling again while closing (or once closed) returns the same
        awaitable. State listeners are released once closed.

        Returns:
            Awaitable resolving to True once closed

        Raises:
            CloseUnavailableError: If the client is not connected
        """
        return self._lifecycle.begin_close(self._close_client)

    async def _connect_client(self) -> None:
        try:
            with translate_platform_errors():
                await self._client.connect()
        except Exception:
            await self._release_client()
            raise

    async def _release_client(self) -> None:
        """Close the platform API client after a failed connection attempt."""
        try:
            await self._client.close()
        except Exception as e:
            logger.warning(
                "Failed to release platform API client after connection failure",
                extra={"error_type": type(e).__name__, "error_message": str(e)},
            )

    async def _close_client(self) -> None:
        with translate_platform_errors():
            await self._client.close()

    async def __aenter__(self) -> GenesysCloudDataUtils:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.state is LifecycleState.CONNECTED:
            await self.close()

    def subscribe_state_changes(self, callback: StateListener) -> None:
        """Subscribe to lifecycle state change events.

        Args:
            callback: Sync or async function receiving a StateChangeEvent
        """
        self._lifecycle.subscribe(callback)

    def unsubscribe_state_changes(self, callback: StateListener) -> None:
        self._lifecycle.unsubscribe(callback)

    # ----------------------
    # Listings
    # ----------------------
    async def get_all_users(
        self, *, page_size: int = constants.GET_USERS_PAGE_SIZE
    ) -> AsyncIterator[list[Any]]:
        """Yield every user (active, inactive and deleted), one page at a time."""
        self._lifecycle.require_connected()
        validate_page_size(page_size)

        async def fetch(request: PageRequest) -> Any:
            return await self._invoke(
                self._client.users.get_users,
                {"pageNumber": request.page_number, "pageSize": request.page_size, "state": "any"},
            )

        async for batch in self._paginate(PageNumberPaginator(resource="users"), fetch, page_size):
            yield batch

    async def get_all_groups(
        self, *, page_size: int = constants.GET_GROUPS_PAGE_SIZE
    ) -> AsyncIterator[list[Any]]:
        """Yield every group, one page at a time."""
        self._lifecycle.require_connected()
        validate_page_size(page_size)

        async def fetch(request: PageRequest) -> Any:
            return await self._invoke(
                self._client.groups.get_groups,
                {"pageNumber": request.page_number, "pageSize": request.page_size},
            )

        async for batch in self._paginate(PageNumberPaginator(resource="groups"), fetch, page_size):
            yield batch

    async def get_all_queues(
        self, *, page_size: int = constants.GET_QUEUES_PAGE_SIZE
    ) -> AsyncIterator[list[Any]]:
        """Yield every routing queue, one page at a time."""
        self._lifecycle.require_connected()
        validate_page_size(page_size)

        async for batch in self._paginate_queues(page_size):
            yield batch

    async def get_queue_members(
        self, queue_id: str, *, page_size: int = constants.GET_QUEUE_MEMBERS_PAGE_SIZE
    ) -> AsyncIterator[list[Any]]:
        """Yield the members of a routing queue, one page at a time.

        Args:
            queue_id: Queue ID (UUID)
            page_size: Number of members per page

        Raises:
            QueueIdTypeInvalidError: If queue_id is not a string
            QueueIdInvalidUUIDError: If queue_id is not a UUID
        """
        self._lifecycle.require_connected()
        validate_uuid(queue_id, QueueIdTypeInvalidError, QueueIdInvalidUUIDError)
        validate_page_size(page_size)

        async def fetch(request: PageRequest) -> Any:
            return await self._invoke(
                self._client.routing.get_routing_queue_members,
                queue_id,
                {"pageNumber": request.page_number, "pageSize": request.page_size},
            )

        paginator = CursorPaginator(
            QueueMemberListingResponse,
            items_field="entities",
            continuation_field="next_uri",
            resource="queue_members",
        )
        async for batch in self._paginate(paginator, fetch, page_size):
            yield batch

    async def _paginate_queues(self, page_size: int) -> AsyncIterator[list[Any]]:
        async def fetch(request: PageRequest) -> Any:
            return await self._invoke(
                self._client.routing.get_routing_queues,
                {"pageNumber": request.page_number, "pageSize": request.page_size},
            )

        paginator = PageNumberPaginator(EntityListingResponse, resource="queues")
        async for batch in self._paginate(paginator, fetch, page_size):
            yield batch

    @staticmethod
    async def _paginate(
        paginator: PageNumberPaginator | CursorPaginator,
        fetch: Callable[[PageRequest], Awaitable[Any]],
        page_size: int,
    ) -> AsyncIterator[list[Any]]:
        async with contextlib.aclosing(paginator.pages(fetch, page_size)) as batches:
            async for batch in batches:
                yield batch

    # ----------------------
    # Timestamps
    # ----------------------
    async def get_conversations_datalake_availability_timestamp(self) -> datetime:
        """Get the date up to which conversations details are in the datalake."""
        self._lifecycle.require_connected()
        response = await self._invoke(
            self._client.analytics.get_conversations_details_jobs_availability
        )
        return self._availability_timestamp(response)

    async def get_users_datalake_availability_timestamp(self) -> datetime:
        """Get the date up to which users details are in the datalake."""
        self._lifecycle.require_connected()
        response = await self._invoke(self._client.analytics.get_users_details_jobs_availability)
        return self._availability_timestamp(response)

    async def get_oldest_queue_creation_timestamp(
        self, *, page_size: int = constants.GET_QUEUES_PAGE_SIZE
    ) -> datetime:
        """Get the creation date of the oldest routing queue.

        Returns:
            Earliest ``dateCreated`` of all queues (now when there are no queues)
        """
        self._lifecycle.require_connected()
        validate_page_size(page_size)

        oldest: datetime | None = None
        async with contextlib.aclosing(self._paginate_queues(page_size)) as batches:
            async for queues in batches:
                for queue in queues:
                    record = validate_response(queue, QueueRecord, owner=_QUEUE_OWNER)
                    created = parse_response_timestamp(
                        record.date_created, _QUEUE_OWNER, "dateCreated"
                    )
                    if oldest is None or created < oldest:
                        oldest = created

        return oldest if oldest is not None else timing.utcnow()

    def _availability_timestamp(self, response: Any) -> datetime:
        availability = validate_response(response, DataAvailabilityResponse)
        return parse_response_timestamp(
            availability.body.data_availability_date, "The response body", "dataAvailabilityDate"
        )

    # ----------------------
    # Bulk exports
    # ----------------------
    async def get_conversations_details_from_datalake(
        self,
        start: datetime,
        end: datetime,
        *,
        page_size: int = constants.DATALAKE_PAGE_SIZE,
        days_per_job: int = constants.DATALAKE_DAYS_PER_JOB,
    ) -> AsyncIterator[list[Any]]:
        """Yield conversations details of ``[start, end)`` from the datalake.

        The end of the range is clipped to the datalake availability
        timestamp. One export job runs per ``days_per_job`` chunk.

        Args:
            start: Start of the range (inclusive)
            end: End of the range (exclusive)
            page_size: Number of conversations per results page
            days_per_job: Maximum number of days covered by one job

        Raises:
            StartTimestampNoDataError: If start is not earlier than the availability timestamp
            ConversationsDetailsJobFailedError: If a job fails
            ConversationsDetailsJobCancelledError: If a job is cancelled
            ConversationsDetailsJobExpiredError: If a job expires
        """
        self._lifecycle.require_connected()
        start, end = validate_interval(start, end)
        validate_page_size(page_size)
        validate_days_per_job(days_per_job)

        availability = await self.get_conversations_datalake_availability_timestamp()
        start, end = _clip_to_availability(start, end, availability)

        analytics = self._client.analytics
        binding = self._export_binding(
            kind=JobKind.CONVERSATIONS_DETAILS,
            submit=analytics.post_conversations_details_jobs,
            status=analytics.get_conversations_details_job,
            results=analytics.get_conversations_details_job_results,
            delete=analytics.delete_conversations_details_job,
            results_paginator=CursorPaginator(
                ConversationsJobResultsResponse,
                items_field="conversations",
                resource=JobKind.CONVERSATIONS_DETAILS.value,
            ),
            job_errors={
                JobOutcome.FAILED: errors.ConversationsDetailsJobFailedError,
                JobOutcome.CANCELLED: errors.ConversationsDetailsJobCancelledError,
                JobOutcome.EXPIRED: errors.ConversationsDetailsJobExpiredError,
            },
        )
        async for batch in self._run_jobs(binding, start, end, page_size, days_per_job):
            yield batch

    async def get_users_details_from_datalake(
        self,
        start: datetime,
        end: datetime,
        *,
        page_size: int = constants.DATALAKE_PAGE_SIZE,
        days_per_job: int = constants.DATALAKE_DAYS_PER_JOB,
    ) -> AsyncIterator[list[Any]]:
        """Yield users details of ``[start, end)`` from the datalake.

        Same behavior as ``get_conversations_details_from_datalake`` using the
        users details jobs and their availability timestamp.
        """
        self._lifecycle.require_connected()
        start, end = validate_interval(start, end)
        validate_page_size(page_size)
        validate_days_per_job(days_per_job)

        availability = await self.get_users_datalake_availability_timestamp()
        start, end = _clip_to_availability(start, end, availability)

        analytics = self._client.analytics
        binding = self._export_binding(
            kind=JobKind.USERS_DETAILS,
            submit=analytics.post_users_details_jobs,
            status=analytics.get_users_details_job,
            results=analytics.get_users_details_job_results,
            delete=analytics.delete_users_details_job,
            results_paginator=CursorPaginator(
                UsersJobResultsResponse,
                items_field="user_details",
                resource=JobKind.USERS_DETAILS.value,
            ),
            job_errors={
                JobOutcome.FAILED: errors.UsersDetailsJobFailedError,
                JobOutcome.CANCELLED: errors.UsersDetailsJobCancelledError,
                JobOutcome.EXPIRED: errors.UsersDetailsJobExpiredError,
            },
        )
        async for batch in self._run_jobs(binding, start, end, page_size, days_per_job):
            yield batch

    def _export_binding(
        self,
        *,
        kind: JobKind,
        submit: Callable[..., Awaitable[Any]],
        status: Callable[..., Awaitable[Any]],
        results: Callable[..., Awaitable[Any]],
        delete: Callable[..., Awaitable[Any]],
        results_paginator: CursorPaginator,
        job_errors: dict[JobOutcome, type[errors.JobError]],
    ) -> JobBinding:
        async def submit_job(chunk: IntervalChunk) -> Any:
            return await self._invoke(submit, {"interval": chunk.to_interval()})

        async def get_status(job_id: str) -> Any:
            return await self._invoke(status, job_id)

        async def get_results(job_id: str, request: PageRequest) -> Any:
            params: dict[str, Any] = {"pageSize": request.page_size}
            if request.cursor is not None:
                params["cursor"] = request.cursor
            return await self._invoke(results, job_id, params)

        async def delete_job(job_id: str) -> Any:
            return await self._invoke(delete, job_id)

        return JobBinding(
            kind=kind,
            submit=submit_job,
            status=get_status,
            results=get_results,
            delete=delete_job,
            submission_schema=JobSubmissionResponse,
            outcomes=EXPORT_JOB_OUTCOMES,
            errors=job_errors,
            results_paginator=results_paginator,
        )

    # ----------------------
    # Audit logs
    # ----------------------
    async def get_events_from_audit_log(
        self,
        start: datetime,
        end: datetime,
        service_name: str,
        *,
        entity_type: str | None = None,
        page_size: int = constants.AUDIT_LOGS_PAGE_SIZE,
    ) -> AsyncIterator[list[Any]]:
        """Yield audit events of a service within ``[start, end)``.

        The range is split into 30-day queries. Consecutive query submissions
        of this client are spaced by at least 6 seconds.

        Args:
            start: Start of the range (inclusive)
            end: End of the range (exclusive)
            service_name: Audited service (e.g. "Architect")
            entity_type: Optional entity type filter
            page_size: Number of events per results page

        Raises:
            ServiceNameTypeInvalidError: If service_name is not a string
            EntityTypeTypeInvalidError: If entity_type is neither None nor a string
            AuditLogQueryFailedError: If a query fails
            AuditLogQueryCancelledError: If a query is cancelled
        """
        self._lifecycle.require_connected()
        start, end = validate_interval(start, end)
        validate_string(service_name, ServiceNameTypeInvalidError)
        if entity_type is not None:
            validate_string(entity_type, EntityTypeTypeInvalidError)
        validate_page_size(page_size)

        audit = self._client.audit

        async def submit_query(chunk: IntervalChunk) -> Any:
            body: dict[str, Any] = {"interval": chunk.to_interval(), "serviceName": service_name}
            if entity_type is not None:
                body["filters"] = [{"property": "entityType", "value": entity_type}]
            return await self._invoke(audit.post_audits_query, body)

        async def get_status(query_id: str) -> Any:
            return await self._invoke(audit.get_audits_query, query_id)

        async def get_results(query_id: str, request: PageRequest) -> Any:
            params: dict[str, Any] = {"pageSize": request.page_size, "allowRedirect": False}
            if request.cursor is not None:
                params["cursor"] = request.cursor
            return await self._invoke(audit.get_audits_query_results, query_id, params)

        binding = JobBinding(
            kind=JobKind.AUDIT_LOG_QUERY,
            submit=submit_query,
            status=get_status,
            results=get_results,
            delete=None,
            submission_schema=AuditQuerySubmissionResponse,
            outcomes=AUDIT_QUERY_OUTCOMES,
            errors={
                JobOutcome.FAILED: errors.AuditLogQueryFailedError,
                JobOutcome.CANCELLED: errors.AuditLogQueryCancelledError,
            },
            results_paginator=CursorPaginator(
                AuditQueryResultsResponse,
                items_field="entities",
                resource=JobKind.AUDIT_LOG_QUERY.value,
            ),
            throttle=self._audit_throttle,
        )
        async for batch in self._run_jobs(
            binding, start, end, page_size, constants.AUDIT_LOG_QUERY_MAX_DAYS
        ):
            yield batch

    # ----------------------
    # Helpers
    # ----------------------
    async def _run_jobs(
        self,
        binding: JobBinding,
        start: datetime,
        end: datetime,
        page_size: int,
        days_per_job: int,
    ) -> AsyncIterator[list[Any]]:
        planner = IntervalPlanner(IntervalPolicy.days(days_per_job), resource=binding.kind.value)
        orchestrator = JobOrchestrator(binding, planner)
        async with contextlib.aclosing(orchestrator.run(start, end, page_size)) as batches:
            async for batch in batches:
                yield batch

    @staticmethod
    async def _invoke(call: Callable[..., Awaitable[Any]], *args: Any) -> Any:
        """Call the platform API client, translating its errors."""
        with translate_platform_errors():
            return await call(*args)


def _clip_to_availability(
    start: datetime, end: datetime, availability: datetime
) -> tuple[datetime, datetime]:
    if start >= availability:
        raise StartTimestampNoDataError()
    return start, min(end, availability)
