"""Bulk request chunking.

Endpoints that accept a list of identifiers cap how many one request may
carry. This layer splits oversized lists into contiguous chunks, runs one
request per chunk in sequence and reassembles the results in input order.

Architecture:
    - definitions.py: Chunk metadata structures (ChunkPolicy, ChunkPlan, ChunkResult)
    - planners.py: Chunk planning logic and the fail-fast size check
    - executors.py: Chunk execution logic (sequential fetch and reassembly)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import ChunkPlan, ChunkPolicy, ChunkResult
from .executors import ChunkExecutor, chunked_request
from .planners import ChunkPlanner, check_bulk_size

__all__ = [
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "check_bulk_size",
    "chunked_request",
]
