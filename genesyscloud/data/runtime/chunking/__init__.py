"""Interval chunking layer for bulk exports and audit queries.

Architecture:
    The chunking layer consists of:
    - definitions.py: Chunk structures (IntervalPolicy, IntervalChunk)
    - planners.py: Chunk planning logic (determines chunk windows)
    - telemetry.py: Structured logging for chunk and job execution
"""

from __future__ import annotations

from .definitions import IntervalChunk, IntervalPolicy, format_timestamp
from .planners import IntervalPlanner

__all__ = [
    "IntervalChunk",
    "IntervalPolicy",
    "IntervalPlanner",
    "format_timestamp",
]
