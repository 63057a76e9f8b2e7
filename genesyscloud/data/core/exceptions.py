"""Custom exception hierarchy.

Families:
    - Argument validation: raised before any network activity
    - Client state: operation attempted in the wrong lifecycle state
    - Remote response: platform errors and incomplete response bodies
    - Job outcome: a submitted job or query ended without success
    - Internal: unexpected conditions, with the original error attached
"""

from __future__ import annotations

from typing import Any


class DataUtilsError(Exception):
    """Base exception for all library errors."""

    pass


class InternalError(DataUtilsError):
    """An internal error occurred."""

    def __init__(
        self,
        extended_message: str | None = None,
        extended_error: Any = None,
    ) -> None:
        super().__init__("An internal Genesys Cloud data utilities error has occurred.")
        self.extended_message = extended_message
        self.extended_error = extended_error

    def __str__(self) -> str:
        if self.extended_message:
            return f"{self.args[0]} {self.extended_message}"
        return self.args[0]


# ----------------------
# Argument validation
# ----------------------
class ArgumentTypeError(DataUtilsError, TypeError):
    """An argument has the wrong type."""

    message = "An argument type is not valid."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ArgumentValueError(DataUtilsError, ValueError):
    """An argument has the right type but an unacceptable value."""

    message = "An argument value is out of bounds."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ClientIdTypeInvalidError(ArgumentTypeError):
    message = "The Genesys Cloud OAuth client ID type is not valid. It must be a string."


class ClientIdInvalidUUIDError(ArgumentTypeError):
    message = "The Genesys Cloud OAuth client ID is not a valid UUID."


class ClientSecretTypeInvalidError(ArgumentTypeError):
    message = "The Genesys Cloud OAuth client secret type is not valid. It must be a string."


class RegionTypeInvalidError(ArgumentTypeError):
    message = "The Genesys Cloud region type is not valid. It must be a string."


class RegionInvalidError(ArgumentValueError):
    """Region is not one of the supported Genesys Cloud regions."""

    def __init__(self, region: str) -> None:
        super().__init__(f'The Genesys Cloud region "{region}" is not valid.')
        self.region = region


class EnvironmentVariablesMissingError(ArgumentValueError):
    """Required credential environment variables are not set."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Environment variables not set: {', '.join(missing)}")
        self.missing = missing


class SocketTimeoutTypeInvalidError(ArgumentTypeError):
    message = "The HTTP client socket timeout type is not valid. It must be an integer."


class SocketTimeoutOutOfBoundsError(ArgumentValueError):
    message = "The HTTP client socket timeout is out of bounds. It must be a positive integer."


class TimeBetweenRequestsTypeInvalidError(ArgumentTypeError):
    message = "The time between API requests type is not valid. It must be an integer."


class TimeBetweenRequestsOutOfBoundsError(ArgumentValueError):
    message = "The time between API requests is out of bounds. It must be a positive integer."


class MaxRetriesTypeInvalidError(ArgumentTypeError):
    message = "The maximum API request retries type is not valid. It must be an integer."


class MaxRetriesOutOfBoundsError(ArgumentValueError):
    message = "The maximum API request retries value is out of bounds. It must be a positive integer."


class PageSizeTypeInvalidError(ArgumentTypeError):
    message = "The page size type is not valid. It must be an integer."


class PageSizeOutOfBoundsError(ArgumentValueError):
    message = "The page size is out of bounds. It must be a positive integer."


class QueueIdTypeInvalidError(ArgumentTypeError):
    message = "The queue ID type is not valid. It must be a string."


class QueueIdInvalidUUIDError(ArgumentTypeError):
    message = "The queue ID is not a valid UUID."


class StartTimestampTypeInvalidError(ArgumentTypeError):
    message = "The start timestamp type is not valid. It must be a datetime object."


class EndTimestampTypeInvalidError(ArgumentTypeError):
    message = "The end timestamp type is not valid. It must be a datetime object."


class IntervalMismatchError(ArgumentValueError):
    message = "The start timestamp must be earlier than the end timestamp."


class StartTimestampNoDataError(ArgumentValueError):
    message = "The start timestamp is beyond the datalake availability date."


class DaysPerJobTypeInvalidError(ArgumentTypeError):
    message = "The days per job argument type is not valid. It must be an integer."


class DaysPerJobOutOfBoundsError(ArgumentValueError):
    message = "The days per job argument is out of bounds. It must be a positive integer."


class ServiceNameTypeInvalidError(ArgumentTypeError):
    message = "The service name argument type is not valid. It must be a string."


class EntityTypeTypeInvalidError(ArgumentTypeError):
    message = "The entity type argument type is not valid. It must be a string."


# ----------------------
# Client state
# ----------------------
class ClientStateError(DataUtilsError):
    """Operation not allowed in the current lifecycle state."""

    message = "The Genesys Cloud data utilities client is not in the required state."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ConnectUnavailableError(ClientStateError):
    message = (
        "The Genesys Cloud data utilities client is not in a state that allows its initialization."
    )


class CloseUnavailableError(ClientStateError):
    message = "The Genesys Cloud data utilities client is not in a state that allows its closing."


class ClientNotConnectedError(ClientStateError):
    message = "The Genesys Cloud data utilities client is not connected."


# ----------------------
# Remote responses
# ----------------------
class RemoteResponseError(DataUtilsError):
    """The platform answered with an error or an unusable response."""

    pass


class ClientIdNotFoundError(RemoteResponseError):
    def __init__(self) -> None:
        super().__init__("The Genesys Cloud OAuth client ID was not found in the platform.")


class AuthenticationFailureError(RemoteResponseError):
    def __init__(self) -> None:
        super().__init__("OAuth authentication failure. Check the Genesys Cloud OAuth client secret.")


class UnexpectedResponseError(RemoteResponseError):
    """The platform returned an error payload."""

    def __init__(self, response_error: Any = None) -> None:
        super().__init__("The Genesys Cloud Platform API request returned an unexpected error.")
        self.response_error = response_error


class UnexpectedStatusCodeError(RemoteResponseError):
    """The platform returned an HTTP status code the client cannot handle."""

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__(
            "The Genesys Cloud Platform API request returned an unexpected HTTP status code."
        )
        self.status_code = status_code


class IncompleteResponseError(RemoteResponseError):
    """A response is missing a required property or has a type mismatch."""

    def __init__(self, extended_message: str) -> None:
        super().__init__(
            "The Genesys Cloud Platform API request returned an incomplete response."
        )
        self.extended_message = extended_message

    def __str__(self) -> str:
        return f"{self.args[0]} {self.extended_message}"


# ----------------------
# Job outcomes
# ----------------------
class JobError(DataUtilsError):
    """A job or query reached a terminal state other than success."""

    subject = "job"
    verb = "has ended"

    def __init__(self, job_id: str, status_body: Any = None) -> None:
        super().__init__(f'The {self.subject} with ID "{job_id}" {self.verb}.')
        self.job_id = job_id
        self.status_body = status_body


class JobFailedError(JobError):
    verb = "has failed"


class JobCancelledError(JobError):
    verb = "has been cancelled"


class JobExpiredError(JobError):
    verb = "has expired"


class ConversationsDetailsJobFailedError(JobFailedError):
    subject = "conversations details job"


class ConversationsDetailsJobCancelledError(JobCancelledError):
    subject = "conversations details job"


class ConversationsDetailsJobExpiredError(JobExpiredError):
    subject = "conversations details job"


class UsersDetailsJobFailedError(JobFailedError):
    subject = "users details job"


class UsersDetailsJobCancelledError(JobCancelledError):
    subject = "users details job"


class UsersDetailsJobExpiredError(JobExpiredError):
    subject = "users details job"


class AuditLogQueryFailedError(JobFailedError):
    subject = "audit log query"


class AuditLogQueryCancelledError(JobCancelledError):
    subject = "audit log query"
