"""Chunking metadata definitions and policy structures.

This module defines the data structures used to describe how a bulk
request over a list of identifiers is split into API-permitted batches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for a bulk endpoint.

    Attributes:
        max_per_request: Maximum number of identifiers one request accepts
        allow_bulk_requests: Whether oversized id lists may be split into
            several requests (False = fail fast with TooManyIdentifiersError)
    """

    max_per_request: int
    allow_bulk_requests: bool = False

    def __post_init__(self) -> None:
        if self.max_per_request < 1:
            raise ValueError("ChunkPolicy max_per_request must be at least 1")


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk.

    Attributes:
        identifiers: Identifiers sent in this chunk, in input order
        chunk_index: Zero-based index of this chunk in the overall plan
        start: Position of the chunk's first identifier in the input list
    """

    identifiers: tuple[str, ...]
    chunk_index: int = 0
    start: int = 0

    @property
    def size(self) -> int:
        return len(self.identifiers)


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        data: Concatenated per-chunk results, aligned with the input identifiers
        chunks_used: Number of chunks that were fetched
        total_identifiers: Number of identifiers covered by the executed plans
    """

    data: list[Any] = field(default_factory=list)
    chunks_used: int = 0
    total_identifiers: int = 0
