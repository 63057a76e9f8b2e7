"""Genesys Cloud Data - Bulk data retrieval utilities for the Genesys Cloud platform."""

from .clients.data_utils import GenesysCloudDataUtils
from .core import (
    ClientNotConnectedError,
    ClientOptions,
    ClientStateError,
    CloseUnavailableError,
    ConnectUnavailableError,
    Credentials,
    DataUtilsError,
    IncompleteResponseError,
    InternalError,
    JobCancelledError,
    JobError,
    JobExpiredError,
    JobFailedError,
    JobOutcome,
    LifecycleState,
    RemoteResponseError,
    constants,
    errors,
)
from .models import JobKind, StateChangeEvent
from .platform import PlatformAPIClient, PlatformClient

__version__ = "0.1.0"

__all__ = [
    # Client
    "GenesysCloudDataUtils",
    "PlatformAPIClient",
    "PlatformClient",
    # Configuration
    "ClientOptions",
    "Credentials",
    "constants",
    # Lifecycle
    "LifecycleState",
    "StateChangeEvent",
    # Jobs
    "JobKind",
    "JobOutcome",
    # Errors
    "errors",
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
