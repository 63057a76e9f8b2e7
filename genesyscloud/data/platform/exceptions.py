"""Platform API client errors and their translation.

The platform API client raises the errors below. ``translate_platform_errors``
maps them onto the public ``DataUtilsError`` hierarchy so that no collaborator
error reaches library callers untranslated.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..core.exceptions import (
    AuthenticationFailureError,
    ClientIdNotFoundError,
    DataUtilsError,
    InternalError,
    UnexpectedResponseError,
    UnexpectedStatusCodeError,
)


class PlatformAPIClientError(Exception):
    """Base exception for platform API client errors."""

    pass


class PlatformClientIdNotFoundError(PlatformAPIClientError):
    """The OAuth client ID does not exist in the region."""

    pass


class PlatformAuthenticationFailureError(PlatformAPIClientError):
    """The OAuth client secret was rejected."""

    pass


class PlatformUnexpectedResponseError(PlatformAPIClientError):
    """The platform answered with an error payload."""

    def __init__(self, response_error: Any = None) -> None:
        super().__init__("The platform API returned an unexpected error response.")
        self.response_error = response_error


class PlatformUnexpectedStatusCodeError(PlatformAPIClientError):
    """The platform answered with a status code that cannot be handled."""

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__(f"The platform API returned an unexpected HTTP status code: {status_code}")
        self.status_code = status_code


class PlatformInternalError(PlatformAPIClientError):
    """Transport failure or unexpected condition inside the client."""

    def __init__(self, extended_message: str | None = None, extended_error: Any = None) -> None:
        super().__init__(extended_message or "The platform API client failed.")
        self.extended_message = extended_message
        self.extended_error = extended_error


@contextmanager
def translate_platform_errors() -> Iterator[None]:
    """Re-raise collaborator errors as library errors.

    Library errors pass through unchanged. Any other exception becomes an
    ``InternalError`` carrying the original error.
    """
    try:
        yield
    except DataUtilsError:
        raise
    except PlatformClientIdNotFoundError as e:
        raise ClientIdNotFoundError() from e
    except PlatformAuthenticationFailureError as e:
        raise AuthenticationFailureError() from e
    except PlatformUnexpectedResponseError as e:
        raise UnexpectedResponseError(e.response_error) from e
    except PlatformUnexpectedStatusCodeError as e:
        raise UnexpectedStatusCodeError(e.status_code) from e
    except PlatformInternalError as e:
        raise InternalError(e.extended_message, e.extended_error) from e
    except Exception as e:
        raise InternalError(str(e), e) from e
