"""Unit tests for lifecycle and job state enumerations."""

from genesyscloud.data.core.enums import (
    AUDIT_QUERY_OUTCOMES,
    EXPORT_JOB_OUTCOMES,
    LIFECYCLE_TRANSITIONS,
    AuditQueryState,
    ExportJobState,
    JobOutcome,
    LifecycleState,
)


class TestLifecycleState:
    """Test LifecycleState and its transition table."""

    def test_values_are_names(self):
        """Test enum values match their names."""
        assert LifecycleState.CONNECTED.value == "CONNECTED"
        assert LifecycleState("CLOSING") is LifecycleState.CLOSING

    def test_terminal_states(self):
        """Test CLOSED and FAILED have no outgoing transitions."""
        assert LIFECYCLE_TRANSITIONS[LifecycleState.CLOSED] == frozenset()
        assert LIFECYCLE_TRANSITIONS[LifecycleState.FAILED] == frozenset()
        assert LIFECYCLE_TRANSITIONS[LifecycleState.CONNECTED]

    def test_transition_table(self):
        """Test the allowed transitions."""
        assert LIFECYCLE_TRANSITIONS[None] == {LifecycleState.CREATED}
        assert LIFECYCLE_TRANSITIONS[LifecycleState.CREATED] == {LifecycleState.CONNECTING}
        assert LIFECYCLE_TRANSITIONS[LifecycleState.CONNECTING] == {
            LifecycleState.CONNECTED,
            LifecycleState.FAILED,
        }
        assert LIFECYCLE_TRANSITIONS[LifecycleState.CONNECTED] == {LifecycleState.CLOSING}
        assert LIFECYCLE_TRANSITIONS[LifecycleState.CLOSING] == {
            LifecycleState.CLOSED,
            LifecycleState.FAILED,
        }
        assert not LIFECYCLE_TRANSITIONS[LifecycleState.CLOSED]
        assert not LIFECYCLE_TRANSITIONS[LifecycleState.FAILED]


class TestJobOutcomes:
    """Test classification of platform job states."""

    def test_export_job_states(self):
        """Test every export job state is classified."""
        assert set(EXPORT_JOB_OUTCOMES) == {state.value for state in ExportJobState}
        assert EXPORT_JOB_OUTCOMES["FULFILLED"] is JobOutcome.SUCCEEDED
        assert EXPORT_JOB_OUTCOMES["QUEUED"] is JobOutcome.IN_PROGRESS
        assert EXPORT_JOB_OUTCOMES["PENDING"] is JobOutcome.IN_PROGRESS
        assert EXPORT_JOB_OUTCOMES["EXPIRED"] is JobOutcome.EXPIRED

    def test_audit_query_states(self):
        """Test audit query states use their own vocabulary."""
        assert set(AUDIT_QUERY_OUTCOMES) == {state.value for state in AuditQueryState}
        assert AUDIT_QUERY_OUTCOMES["Succeeded"] is JobOutcome.SUCCEEDED
        assert AUDIT_QUERY_OUTCOMES["Running"] is JobOutcome.IN_PROGRESS
        assert "FULFILLED" not in AUDIT_QUERY_OUTCOMES
