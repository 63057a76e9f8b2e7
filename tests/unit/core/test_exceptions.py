"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from genesyscloud.data.core import errors
from genesyscloud.data.core import (
    ClientStateError,
    DataUtilsError,
    IncompleteResponseError,
    InternalError,
    JobError,
    RemoteResponseError,
)


def test_internal_error_carries_extended_details():
    """Test InternalError keeps the extended message and original error."""
    cause = RuntimeError("boom")
    error = InternalError("Something odd happened.", cause)
    assert error.extended_message == "Something odd happened."
    assert error.extended_error is cause
    assert str(error).endswith("Something odd happened.")
    assert isinstance(error, DataUtilsError)


def test_internal_error_without_extended_message():
    """Test InternalError string is the base message alone."""
    error = InternalError()
    assert str(error) == "An internal Genesys Cloud data utilities error has occurred."


def test_argument_errors_are_builtin_type_and_value_errors():
    """Test argument validation errors subclass TypeError/ValueError."""
    assert isinstance(errors.PageSizeTypeInvalidError(), TypeError)
    assert isinstance(errors.PageSizeOutOfBoundsError(), ValueError)
    assert isinstance(errors.IntervalMismatchError(), ValueError)
    assert isinstance(errors.StartTimestampNoDataError(), ValueError)
    assert isinstance(errors.ClientIdInvalidUUIDError(), DataUtilsError)


def test_region_invalid_error_names_region():
    """Test RegionInvalidError includes the rejected region."""
    error = errors.RegionInvalidError("mars-north-1")
    assert error.region == "mars-north-1"
    assert '"mars-north-1"' in str(error)


def test_state_errors_share_base():
    """Test lifecycle errors derive from ClientStateError."""
    for error_class in (
        errors.ConnectUnavailableError,
        errors.CloseUnavailableError,
        errors.ClientNotConnectedError,
    ):
        assert issubclass(error_class, ClientStateError)
    assert "not connected" in str(errors.ClientNotConnectedError())


def test_remote_errors_carry_details():
    """Test remote response errors keep status code and error payload."""
    status_error = errors.UnexpectedStatusCodeError(302)
    assert status_error.status_code == 302
    assert isinstance(status_error, RemoteResponseError)

    payload = {"code": "bad.request"}
    response_error = errors.UnexpectedResponseError(payload)
    assert response_error.response_error is payload


def test_incomplete_response_error_message():
    """Test IncompleteResponseError appends the extended message."""
    error = IncompleteResponseError('The response is missing the "body" property.')
    assert error.extended_message == 'The response is missing the "body" property.'
    assert str(error).endswith('The response is missing the "body" property.')


def test_job_errors_describe_resource_and_outcome():
    """Test per-resource job errors carry id, status body and wording."""
    body = {"state": "FAILED"}
    error = errors.ConversationsDetailsJobFailedError("job-1", body)
    assert error.job_id == "job-1"
    assert error.status_body is body
    assert str(error) == 'The conversations details job with ID "job-1" has failed.'
    assert isinstance(error, errors.JobFailedError)
    assert isinstance(error, JobError)

    assert str(errors.UsersDetailsJobExpiredError("job-2")) == (
        'The users details job with ID "job-2" has expired.'
    )
    assert str(errors.AuditLogQueryCancelledError("tx-1")) == (
        'The audit log query with ID "tx-1" has been cancelled.'
    )
