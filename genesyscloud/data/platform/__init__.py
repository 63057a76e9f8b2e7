"""Default Genesys Cloud platform API client (aiohttp)."""

from .client import PlatformAPIClient, PlatformClient
from .config import REGION_DOMAINS, get_api_base_url, get_login_url
from .exceptions import (
    PlatformAPIClientError,
    PlatformAuthenticationFailureError,
    PlatformClientIdNotFoundError,
    PlatformInternalError,
    PlatformUnexpectedResponseError,
    PlatformUnexpectedStatusCodeError,
    translate_platform_errors,
)
from .http_client import HTTPClient

__all__ = [
    "PlatformAPIClient",
    "PlatformClient",
    "HTTPClient",
    "REGION_DOMAINS",
    "get_api_base_url",
    "get_login_url",
    "PlatformAPIClientError",
    "PlatformClientIdNotFoundError",
    "PlatformAuthenticationFailureError",
    "PlatformUnexpectedResponseError",
    "PlatformUnexpectedStatusCodeError",
    "PlatformInternalError",
    "translate_platform_errors",
]
