"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any

import aiohttp

from .exceptions import PlatformInternalError

logger = logging.getLogger(__name__)

# Status codes worth retrying: throttled or transient server errors
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class HTTPClient:
    """Async HTTP client wrapper with request spacing and bounded retries.

    Responses are returned as ``{"status", "headers", "body"}`` mappings where
    ``body`` is the decoded JSON payload (or None for empty bodies).
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_ms: int = 60000,
        time_between_requests_ms: int = 200,
        max_retries: int = 5,
    ) -> None:
        self.base_url = base_url
        socket_timeout = timeout_ms / 1000
        self.timeout = aiohttp.ClientTimeout(sock_read=socket_timeout, sock_connect=socket_timeout)
        self.time_between_requests = time_between_requests_ms / 1000
        self.max_retries = max_retries
        self._session: aiohttp.ClientSession | None = None
        self._last_request: float | None = None
        self._lock = asyncio.Lock()

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        auth: aiohttp.BasicAuth | None = None,
    ) -> dict[str, Any]:
        """Send a request, retrying throttled and transient failures.

        Raises:
            PlatformInternalError: If the request cannot be sent after all retries
        """
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        attempt = 0
        while True:
            await self._space_requests()
            try:
                async with self.session.request(
                    method,
                    url,
                    params=params,
                    json=json_body,
                    data=data,
                    headers=headers,
                    auth=auth,
                ) as response:
                    status = response.status
                    response_headers = dict(response.headers)
                    text = await response.text()
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                if attempt >= self.max_retries:
                    raise PlatformInternalError(f"{method} {url} failed: {e}", e) from e
                attempt += 1
                logger.warning(
                    "http_request_retry",
                    extra={"method": method, "url": url, "attempt": attempt, "error": str(e)},
                )
                await asyncio.sleep(self._retry_delay(attempt, None))
                continue

            if status in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                attempt += 1
                delay = self._retry_delay(attempt, response_headers.get("Retry-After"))
                logger.warning(
                    "http_request_retry",
                    extra={"method": method, "url": url, "attempt": attempt, "status": status},
                )
                await asyncio.sleep(delay)
                continue

            return {"status": status, "headers": response_headers, "body": _decode(text)}

    async def _space_requests(self) -> None:
        async with self._lock:
            if self._last_request is not None:
                wait = self._last_request + self.time_between_requests - time.monotonic()
                if wait > 0:
                    await asyncio.sleep(wait)
            self._last_request = time.monotonic()

    @staticmethod
    def _retry_delay(attempt: int, retry_after: str | None) -> float:
        if retry_after is not None:
            try:
                return max(float(retry_after), 0.0)
            except ValueError:
                pass
        return float(min(2 ** (attempt - 1), 30))

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _decode(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text
