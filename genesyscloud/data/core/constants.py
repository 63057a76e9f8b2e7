"""Platform limits and library defaults.

Limits are imposed by the Genesys Cloud platform and are not configurable.
Defaults can be overridden per call or per client instance.
"""

from __future__ import annotations

from datetime import timedelta

# Regions accepted by the platform API client
GC_REGIONS: tuple[str, ...] = (
    "us-east-1",
    "us-east-2",
    "us-west-2",
    "ca-central-1",
    "eu-west-1",
    "eu-west-2",
    "eu-central-1",
    "eu-central-2",
    "ap-south-1",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-northeast-3",
    "ap-southeast-2",
    "sa-east-1",
    "me-central-1",
)

# Audit log queries
AUDIT_LOG_QUERY_MAX_DAYS = 30
AUDIT_LOG_QUERY_INTERVAL = timedelta(seconds=6)

# Client options (milliseconds where applicable)
DEFAULT_SOCKET_TIMEOUT = 60 * 1000
DEFAULT_TIME_BETWEEN_REQUESTS = 200  # 5 requests per second
DEFAULT_MAX_RETRIES = 5

# Page sizes
GET_USERS_PAGE_SIZE = 100
GET_GROUPS_PAGE_SIZE = 100
GET_QUEUES_PAGE_SIZE = 100
GET_QUEUE_MEMBERS_PAGE_SIZE = 100
DATALAKE_PAGE_SIZE = 2000
AUDIT_LOGS_PAGE_SIZE = 500

# Bulk export jobs
DATALAKE_DAYS_PER_JOB = 30

# Polling backoff (seconds)
EXPONENTIAL_BACKOFF_BASE = 2
EXPONENTIAL_BACKOFF_MAX_SECONDS = 60

# Environment variables read by GenesysCloudDataUtils.from_env()
ENV_CLIENT_ID = "GENESYS_CLOUD_CLIENT_ID"
ENV_CLIENT_SECRET = "GENESYS_CLOUD_CLIENT_SECRET"
ENV_REGION = "GENESYS_CLOUD_REGION"
