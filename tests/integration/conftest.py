"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from genesyscloud.data import GenesysCloudDataUtils

# Skip all integration tests unless RUN_GENESYS_CLOUD_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_GENESYS_CLOUD_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_GENESYS_CLOUD_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def utils():
    """Connected client built from GENESYS_CLOUD_* environment variables."""
    async with GenesysCloudDataUtils.from_env() as client:
        yield client
