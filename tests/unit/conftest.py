"""Shared fixtures for unit tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from genesyscloud.data import GenesysCloudDataUtils
from genesyscloud.data.runtime import timing

CLIENT_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"
CLIENT_SECRET = "s3cr3t"
REGION = "eu-west-1"


class FakeClock:
    """Deterministic replacement for the runtime timing module."""

    def __init__(self, now: datetime) -> None:
        self.now = now
        self.sleeps: list[float] = []

    def utcnow(self) -> datetime:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += timedelta(seconds=seconds)


class FakePlatformClient:
    """Platform API client double exposing the resource groups as AsyncMocks."""

    def __init__(self, *args, **kwargs) -> None:
        self.args = args
        self.kwargs = kwargs
        self.connect = AsyncMock(return_value=None)
        self.close = AsyncMock(return_value=None)
        self.users = SimpleNamespace(get_users=AsyncMock())
        self.groups = SimpleNamespace(get_groups=AsyncMock())
        self.routing = SimpleNamespace(
            get_routing_queues=AsyncMock(),
            get_routing_queue_members=AsyncMock(),
        )
        self.analytics = SimpleNamespace(
            get_conversations_details_jobs_availability=AsyncMock(),
            post_conversations_details_jobs=AsyncMock(),
            get_conversations_details_job=AsyncMock(),
            get_conversations_details_job_results=AsyncMock(),
            delete_conversations_details_job=AsyncMock(),
            get_users_details_jobs_availability=AsyncMock(),
            post_users_details_jobs=AsyncMock(),
            get_users_details_job=AsyncMock(),
            get_users_details_job_results=AsyncMock(),
            delete_users_details_job=AsyncMock(),
        )
        self.audit = SimpleNamespace(
            post_audits_query=AsyncMock(),
            get_audits_query=AsyncMock(),
            get_audits_query_results=AsyncMock(),
        )


@pytest.fixture
def fake_clock(monkeypatch) -> FakeClock:
    """Freeze time at 2024-06-01T00:00:00Z and record every sleep."""
    clock = FakeClock(datetime(2024, 6, 1, tzinfo=UTC))
    monkeypatch.setattr(timing, "utcnow", clock.utcnow)
    monkeypatch.setattr(timing, "sleep", clock.sleep)
    return clock


@pytest.fixture
def platform_client() -> FakePlatformClient:
    return FakePlatformClient()


@pytest.fixture
def make_utils(platform_client):
    """Build GenesysCloudDataUtils instances wired to the fake platform client."""

    def _make(**options) -> GenesysCloudDataUtils:
        return GenesysCloudDataUtils(
            CLIENT_ID,
            CLIENT_SECRET,
            REGION,
            platform_client_factory=lambda *args, **kwargs: platform_client,
            **options,
        )

    return _make
