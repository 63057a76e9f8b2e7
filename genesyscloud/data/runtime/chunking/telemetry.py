"""Structured logging for chunked job and query execution.

This module provides telemetry hooks emitting structured log records for
observability. The library configures no handlers.
"""

from __future__ import annotations

import logging
from datetime import datetime

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    resource: str,
    total_chunks: int,
    span_seconds: int,
    start_time: datetime,
    end_time: datetime,
) -> None:
    """Log chunk plan creation.

    Args:
        resource: Resource identifier
        total_chunks: Total number of chunks planned
        span_seconds: Maximum chunk length in seconds
        start_time: Start of the planned range
        end_time: End of the planned range
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "resource": resource,
            "total_chunks": total_chunks,
            "span_seconds": span_seconds,
            "start_time": start_time.isoformat(),
            "end_time": end_time.isoformat(),
        },
    )


def log_job_submitted(*, resource: str, job_id: str, chunk_index: int, interval: str) -> None:
    logger.info(
        "job_submitted",
        extra={
            "resource": resource,
            "job_id": job_id,
            "chunk_index": chunk_index,
            "interval": interval,
        },
    )


def log_job_polled(*, resource: str, job_id: str, state: str, poll: int, backoff: float) -> None:
    logger.debug(
        "job_polled",
        extra={
            "resource": resource,
            "job_id": job_id,
            "state": state,
            "poll": poll,
            "backoff_seconds": backoff,
        },
    )


def log_chunk_completed(
    *,
    resource: str,
    job_id: str,
    chunk_index: int,
    pages: int,
    records: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        resource: Resource identifier
        job_id: Job or query identifier
        chunk_index: Zero-based index of the chunk
        pages: Number of result pages yielded
        records: Number of records yielded
        latency_ms: Latency from submission to last page, in milliseconds
    """
    logger.info(
        "chunk_completed",
        extra={
            "resource": resource,
            "job_id": job_id,
            "chunk_index": chunk_index,
            "pages": pages,
            "records": records,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_error(
    *,
    resource: str,
    job_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "chunk_error",
        extra={
            "resource": resource,
            "job_id": job_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_cleanup_failed(*, resource: str, job_id: str, error_type: str, error_message: str) -> None:
    logger.warning(
        "job_cleanup_failed",
        extra={
            "resource": resource,
            "job_id": job_id,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_submission_throttled(*, resource: str, wait_seconds: float) -> None:
    logger.debug(
        "submission_throttled",
        extra={"resource": resource, "wait_seconds": wait_seconds},
    )
