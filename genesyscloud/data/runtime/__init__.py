"""Runtime orchestration components."""

from .chunking import IntervalChunk, IntervalPlanner, IntervalPolicy
from .jobs import JobBinding, JobOrchestrator
from .lifecycle import LifecycleStateMachine, StateListener
from .pagination import CursorPaginator, PageNumberPaginator, PageRequest
from .throttle import SubmissionThrottle
from .validator import validate_response

__all__ = [
    "IntervalChunk",
    "IntervalPlanner",
    "IntervalPolicy",
    "JobBinding",
    "JobOrchestrator",
    "LifecycleStateMachine",
    "StateListener",
    "PageNumberPaginator",
    "CursorPaginator",
    "PageRequest",
    "SubmissionThrottle",
    "validate_response",
]
