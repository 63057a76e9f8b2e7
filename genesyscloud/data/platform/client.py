"""Default platform API client.

``PlatformAPIClient`` authenticates with the OAuth client credentials grant,
exposes the resource groups used by the library (``users``, ``groups``,
``routing``, ``analytics``, ``audit``) and revokes its token on close.

Any object satisfying ``PlatformClient`` can be injected instead.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import aiohttp

from ..core import constants
from .config import API_PATH_PREFIX, get_api_base_url, get_login_url
from .exceptions import (
    PlatformAuthenticationFailureError,
    PlatformClientIdNotFoundError,
    PlatformInternalError,
    PlatformUnexpectedResponseError,
    PlatformUnexpectedStatusCodeError,
)
from .http_client import HTTPClient
from .resources import AnalyticsAPI, AuditAPI, GroupsAPI, RoutingAPI, UsersAPI

logger = logging.getLogger(__name__)


class PlatformClient(Protocol):
    """Collaborator interface consumed by the data utilities client."""

    users: Any
    groups: Any
    routing: Any
    analytics: Any
    audit: Any

    async def connect(self) -> Any: ...

    async def close(self) -> Any: ...


class PlatformAPIClient:
    """aiohttp-based Genesys Cloud platform API client."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: str,
        *,
        socket_timeout: int = constants.DEFAULT_SOCKET_TIMEOUT,
        time_between_requests: int = constants.DEFAULT_TIME_BETWEEN_REQUESTS,
        max_retries: int = constants.DEFAULT_MAX_RETRIES,
    ) -> None:
        """Initialize the platform API client.

        Args:
            client_id: OAuth client ID
            client_secret: OAuth client secret
            region: Genesys Cloud region name
            socket_timeout: HTTP socket timeout in milliseconds
            time_between_requests: Minimum spacing between API calls in milliseconds
            max_retries: Maximum retries for throttled or transient failures

        Raises:
            KeyError: If the region is unknown
        """
        self._client_id = client_id
        self._client_secret = client_secret
        self.region = region
        self.login_url = get_login_url(region)
        self.base_url = f"{get_api_base_url(region)}{API_PATH_PREFIX}"
        self._http = HTTPClient(
            self.base_url,
            timeout_ms=socket_timeout,
            time_between_requests_ms=time_between_requests,
            max_retries=max_retries,
        )
        self._access_token: str | None = None

        self.users = UsersAPI(self)
        self.groups = GroupsAPI(self)
        self.routing = RoutingAPI(self)
        self.analytics = AnalyticsAPI(self)
        self.audit = AuditAPI(self)

    @property
    def is_authenticated(self) -> bool:
        return self._access_token is not None

    # ----------------------
    # Lifecycle
    # ----------------------
    async def connect(self) -> None:
        """Obtain an access token with the client credentials grant.

        Raises:
            PlatformClientIdNotFoundError: If the client ID is unknown
            PlatformAuthenticationFailureError: If the client secret is rejected
            PlatformUnexpectedResponseError: If the token response has no token
            PlatformUnexpectedStatusCodeError: On any other status code
        """
        response = await self._http.request(
            "POST",
            self.login_url,
            data={"grant_type": "client_credentials"},
            auth=aiohttp.BasicAuth(self._client_id, self._client_secret),
        )
        status = response["status"]
        body = response["body"]

        if status == 400 and isinstance(body, dict) and body.get("error") == "invalid_client":
            raise PlatformClientIdNotFoundError("The OAuth client ID was not found.")
        if status == 401:
            raise PlatformAuthenticationFailureError("The OAuth client secret was rejected.")
        if status != 200:
            raise PlatformUnexpectedStatusCodeError(status)
        if not isinstance(body, dict) or not isinstance(body.get("access_token"), str):
            raise PlatformUnexpectedResponseError(body)

        self._access_token = body["access_token"]
        logger.info("platform_client_connected", extra={"region": self.region})

    async def close(self) -> None:
        """Revoke the access token and release the HTTP session."""
        try:
            if self._access_token is not None:
                await self.call("DELETE", "/tokens/me")
        finally:
            self._access_token = None
            await self._http.close()
        logger.info("platform_client_closed", extra={"region": self.region})

    # ----------------------
    # Calls
    # ----------------------
    async def call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
    ) -> dict[str, Any]:
        """Send an authenticated API request.

        Args:
            method: HTTP method
            path: Path relative to ``/api/v2``
            params: Query parameters
            json_body: JSON request body

        Returns:
            ``{"status", "headers", "body"}`` mapping

        Raises:
            PlatformInternalError: If the client is not connected
            PlatformUnexpectedResponseError: If the platform answers with an error payload
            PlatformUnexpectedStatusCodeError: If the status code cannot be handled
        """
        if self._access_token is None:
            raise PlatformInternalError("The platform API client is not connected.")

        response = await self._http.request(
            method,
            path,
            params=_encode_params(params),
            json_body=json_body,
            headers={"Authorization": f"Bearer {self._access_token}"},
        )
        status = response["status"]
        if 200 <= status < 300:
            return response

        body = response["body"]
        if status >= 400 and isinstance(body, dict):
            raise PlatformUnexpectedResponseError(body)
        raise PlatformUnexpectedStatusCodeError(status)


def _encode_params(params: dict[str, Any] | None) -> dict[str, str] | None:
    """Render query parameters the way the platform expects them."""
    if params is None:
        return None
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded
