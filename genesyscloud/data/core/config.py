"""Client configuration.

``ClientOptions`` carries the tuning options handed to the platform API
client. They are validated here and passed through unchanged.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from . import constants
from .exceptions import (
    EnvironmentVariablesMissingError,
    MaxRetriesOutOfBoundsError,
    MaxRetriesTypeInvalidError,
    SocketTimeoutOutOfBoundsError,
    SocketTimeoutTypeInvalidError,
    TimeBetweenRequestsOutOfBoundsError,
    TimeBetweenRequestsTypeInvalidError,
)
from .validation import validate_positive_integer


@dataclass(frozen=True)
class ClientOptions:
    """Platform API client tuning options.

    Attributes:
        socket_timeout: HTTP socket timeout in milliseconds
        time_between_requests: Minimum spacing between API calls in milliseconds
        max_retries: Maximum retries for retryable API errors
    """

    socket_timeout: int = constants.DEFAULT_SOCKET_TIMEOUT
    time_between_requests: int = constants.DEFAULT_TIME_BETWEEN_REQUESTS
    max_retries: int = constants.DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        validate_positive_integer(
            self.socket_timeout, SocketTimeoutTypeInvalidError, SocketTimeoutOutOfBoundsError
        )
        validate_positive_integer(
            self.time_between_requests,
            TimeBetweenRequestsTypeInvalidError,
            TimeBetweenRequestsOutOfBoundsError,
        )
        validate_positive_integer(
            self.max_retries, MaxRetriesTypeInvalidError, MaxRetriesOutOfBoundsError
        )


@dataclass(frozen=True)
class Credentials:
    """OAuth client credentials and region."""

    client_id: str
    client_secret: str
    region: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Credentials:
        """Read credentials from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Raises:
            EnvironmentVariablesMissingError: If a required variable is not set
        """
        env = os.environ if environ is None else environ
        missing = [
            name
            for name in (constants.ENV_CLIENT_ID, constants.ENV_CLIENT_SECRET, constants.ENV_REGION)
            if name not in env
        ]
        if missing:
            raise EnvironmentVariablesMissingError(missing)
        return cls(
            client_id=env[constants.ENV_CLIENT_ID],
            client_secret=env[constants.ENV_CLIENT_SECRET],
            region=env[constants.ENV_REGION],
        )
