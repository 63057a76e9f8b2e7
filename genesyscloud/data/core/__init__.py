"""Core components."""

from . import constants
from . import exceptions as errors
from .config import ClientOptions, Credentials
from .enums import (
    AuditQueryState,
    ExportJobState,
    JobOutcome,
    LifecycleState,
)
from .exceptions import (
    ClientNotConnectedError,
    ClientStateError,
    CloseUnavailableError,
    ConnectUnavailableError,
    DataUtilsError,
    IncompleteResponseError,
    InternalError,
    JobCancelledError,
    JobError,
    JobExpiredError,
    JobFailedError,
    RemoteResponseError,
)

__all__ = [
    "constants",
    "errors",
    "ClientOptions",
    "Credentials",
    "LifecycleState",
    "ExportJobState",
    "AuditQueryState",
    "JobOutcome",
    "DataUtilsError",
    "InternalError",
    "ClientStateError",
    "ConnectUnavailableError",
    "CloseUnavailableError",
    "ClientNotConnectedError",
    "RemoteResponseError",
    "IncompleteResponseError",
    "JobError",
    "JobFailedError",
    "JobCancelledError",
    "JobExpiredError",
]
