"""Job and query orchestration.

Drives the asynchronous bulk resources of the platform (conversations details
jobs, users details jobs and audit log queries) through the same protocol:

    submit -> poll with capped exponential backoff -> drain results -> delete

Architecture:
    - JobBinding: per-resource wiring (API calls, schemas, state vocabulary, errors)
    - JobOrchestrator: runs one job per interval chunk, strictly sequentially

The orchestrator never runs two jobs at once for the same call. Deletion is
attempted exactly once per job whatever the outcome, including when the
consumer stops iterating early, and its failures are only logged.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from ..core import constants
from ..core.enums import JobOutcome
from ..core.exceptions import InternalError, JobError
from ..models.jobs import JobHandle, JobKind
from ..models.responses import JobStatusResponse, ResponseModel
from . import timing
from .chunking import IntervalChunk, IntervalPlanner
from .chunking.telemetry import (
    log_chunk_completed,
    log_chunk_error,
    log_cleanup_failed,
    log_job_polled,
    log_job_submitted,
)
from .pagination import CursorPaginator, PageRequest
from .throttle import SubmissionThrottle
from .validator import parse_response_timestamp, validate_response


@dataclass(frozen=True)
class JobBinding:
    """Wiring of one asynchronous bulk resource.

    Attributes:
        kind: Resource identifier
        submit: Submits a job for a chunk and returns the raw response
        status: Fetches the raw status response of a job
        results: Fetches one raw results page of a job
        delete: Deletes a job (None when the resource has no deletion endpoint)
        submission_schema: Schema of the submission response
        outcomes: Platform state -> outcome classification
        errors: Outcome -> error raised for that outcome
        results_paginator: Cursor paginator over the results pages
        throttle: Optional throttle applied before each submission
    """

    kind: JobKind
    submit: Callable[[IntervalChunk], Awaitable[Any]]
    status: Callable[[str], Awaitable[Any]]
    results: Callable[[str, PageRequest], Awaitable[Any]]
    delete: Callable[[str], Awaitable[Any]] | None
    submission_schema: type[ResponseModel]
    outcomes: Mapping[str, JobOutcome]
    errors: Mapping[JobOutcome, type[JobError]]
    results_paginator: CursorPaginator
    throttle: SubmissionThrottle | None = None
    status_schema: type[ResponseModel] = field(default=JobStatusResponse)


def next_backoff(backoff: float) -> float:
    """Grow the polling backoff by the base factor, clamped to the maximum."""
    return min(
        backoff * constants.EXPONENTIAL_BACKOFF_BASE,
        constants.EXPONENTIAL_BACKOFF_MAX_SECONDS,
    )


class JobOrchestrator:
    """Runs jobs chunk by chunk and yields their result batches."""

    def __init__(self, binding: JobBinding, planner: IntervalPlanner) -> None:
        """Initialize job orchestrator.

        Args:
            binding: Resource wiring
            planner: Interval planner producing one chunk per job
        """
        self._binding = binding
        self._planner = planner

    async def run(self, start: Any, end: Any, page_size: int) -> AsyncIterator[list[Any]]:
        """Yield result batches of every chunk of ``[start, end)`` in order.

        Args:
            start: Start of the requested range (inclusive)
            end: End of the requested range (exclusive)
            page_size: Results page size

        Raises:
            JobError: If a job ends failed, cancelled or expired
            InternalError: If a job reports an unknown state
            IncompleteResponseError: If a response does not match its schema
        """
        for chunk in self._planner.plan(start, end):
            async with contextlib.aclosing(self.run_chunk(chunk, page_size)) as batches:
                async for batch in batches:
                    yield batch

    async def run_chunk(self, chunk: IntervalChunk, page_size: int) -> AsyncIterator[list[Any]]:
        """Submit, await and drain the job covering a single chunk."""
        job = await self.submit(chunk)
        started = perf_counter()
        pages = 0
        records = 0
        try:
            await self.wait_for_completion(job)
            async with contextlib.aclosing(self.results(job, page_size)) as batches:
                async for batch in batches:
                    pages += 1
                    records += len(batch)
                    yield batch
        except Exception as e:
            log_chunk_error(
                resource=job.kind.value,
                job_id=job.id,
                chunk_index=chunk.index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            await self.cleanup(job)

        log_chunk_completed(
            resource=job.kind.value,
            job_id=job.id,
            chunk_index=chunk.index,
            pages=pages,
            records=records,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

    async def submit(self, chunk: IntervalChunk) -> JobHandle:
        binding = self._binding
        if binding.throttle is not None:
            await binding.throttle.wait()

        response = await binding.submit(chunk)
        submission = validate_response(response, binding.submission_schema)

        job = JobHandle(
            id=submission.job_id,
            kind=binding.kind,
            chunk=chunk,
            state=submission.initial_state,
            submitted_at=(
                parse_response_timestamp(submission.started_at, "The response body", "startDate")
                if submission.started_at is not None
                else timing.utcnow()
            ),
        )
        if binding.throttle is not None:
            binding.throttle.record(job.submitted_at)

        log_job_submitted(
            resource=binding.kind.value,
            job_id=job.id,
            chunk_index=chunk.index,
            interval=chunk.to_interval(),
        )
        return job

    def classify(self, job: JobHandle, status_body: Any = None) -> JobOutcome:
        """Map the last observed state of a job to an outcome.

        Raises:
            JobError: For failed, cancelled and expired outcomes
            InternalError: If the state is unknown
        """
        outcome = self._binding.outcomes.get(job.state)
        if outcome in (JobOutcome.SUCCEEDED, JobOutcome.IN_PROGRESS):
            return outcome

        error = self._binding.errors.get(outcome) if outcome is not None else None
        if error is None:
            raise InternalError(
                f'The {self._binding.kind.value} job with ID "{job.id}" '
                f'has an unexpected state "{job.state}".',
                status_body,
            )
        raise error(job.id, status_body)

    async def wait_for_completion(self, job: JobHandle) -> None:
        """Poll a job until it succeeds.

        Polling is skipped when the submission already reported success.
        """
        binding = self._binding
        if job.state is not None and binding.outcomes.get(job.state) is JobOutcome.SUCCEEDED:
            return

        backoff: float = 1
        while True:
            backoff = next_backoff(backoff)
            await timing.sleep(backoff)

            response = await binding.status(job.id)
            status = validate_response(response, binding.status_schema)
            job.state = status.body.state
            job.polls += 1
            log_job_polled(
                resource=binding.kind.value,
                job_id=job.id,
                state=job.state,
                poll=job.polls,
                backoff=backoff,
            )

            if self.classify(job, response["body"]) is JobOutcome.SUCCEEDED:
                return

    async def results(self, job: JobHandle, page_size: int) -> AsyncIterator[list[Any]]:
        async def fetch(request: PageRequest) -> Any:
            return await self._binding.results(job.id, request)

        async with contextlib.aclosing(
            self._binding.results_paginator.pages(fetch, page_size)
        ) as batches:
            async for batch in batches:
                yield batch

    async def cleanup(self, job: JobHandle) -> None:
        """Delete a job, logging instead of raising on failure."""
        if self._binding.delete is None:
            return
        try:
            await self._binding.delete(job.id)
        except Exception as e:
            log_cleanup_failed(
                resource=job.kind.value,
                job_id=job.id,
                error_type=type(e).__name__,
                error_message=str(e),
            )
