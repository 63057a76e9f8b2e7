"""Resource-scoped call groups of the platform API client.

Each group wraps the endpoints of one platform API area. Every call returns
the raw ``{"status", "headers", "body"}`` response; response shapes are
checked by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .client import PlatformAPIClient


class ResourceGroup:
    """Base class of the call groups."""

    def __init__(self, client: PlatformAPIClient) -> None:
        self._client = client


class UsersAPI(ResourceGroup):
    async def get_users(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._client.call("GET", "/users", params=params)


class GroupsAPI(ResourceGroup):
    async def get_groups(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._client.call("GET", "/groups", params=params)


class RoutingAPI(ResourceGroup):
    async def get_routing_queues(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._client.call("GET", "/routing/queues", params=params)

    async def get_routing_queue_members(
        self, queue_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._client.call("GET", f"/routing/queues/{queue_id}/members", params=params)


class AnalyticsAPI(ResourceGroup):
    """Conversations and users details jobs (datalake exports)."""

    # Conversations details jobs
    async def get_conversations_details_jobs_availability(self) -> dict[str, Any]:
        return await self._client.call("GET", "/analytics/conversations/details/jobs/availability")

    async def post_conversations_details_jobs(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._client.call(
            "POST", "/analytics/conversations/details/jobs", json_body=body
        )

    async def get_conversations_details_job(self, job_id: str) -> dict[str, Any]:
        return await self._client.call("GET", f"/analytics/conversations/details/jobs/{job_id}")

    async def get_conversations_details_job_results(
        self, job_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._client.call(
            "GET", f"/analytics/conversations/details/jobs/{job_id}/results", params=params
        )

    async def delete_conversations_details_job(self, job_id: str) -> dict[str, Any]:
        return await self._client.call("DELETE", f"/analytics/conversations/details/jobs/{job_id}")

    # Users details jobs
    async def get_users_details_jobs_availability(self) -> dict[str, Any]:
        return await self._client.call("GET", "/analytics/users/details/jobs/availability")

    async def post_users_details_jobs(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._client.call("POST", "/analytics/users/details/jobs", json_body=body)

    async def get_users_details_job(self, job_id: str) -> dict[str, Any]:
        return await self._client.call("GET", f"/analytics/users/details/jobs/{job_id}")

    async def get_users_details_job_results(
        self, job_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._client.call(
            "GET", f"/analytics/users/details/jobs/{job_id}/results", params=params
        )

    async def delete_users_details_job(self, job_id: str) -> dict[str, Any]:
        return await self._client.call("DELETE", f"/analytics/users/details/jobs/{job_id}")


class AuditAPI(ResourceGroup):
    """Audit log queries. The platform offers no deletion endpoint."""

    async def post_audits_query(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._client.call("POST", "/audits/query", json_body=body)

    async def get_audits_query(self, transaction_id: str) -> dict[str, Any]:
        return await self._client.call("GET", f"/audits/query/{transaction_id}")

    async def get_audits_query_results(
        self, transaction_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._client.call(
            "GET", f"/audits/query/{transaction_id}/results", params=params
        )
