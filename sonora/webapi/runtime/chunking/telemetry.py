"""Structured logging for chunking operations.

This module provides telemetry hooks for bulk chunking, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import ChunkPlan, ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    endpoint_id: str,
    total_chunks: int,
    total_identifiers: int,
    max_per_request: int,
) -> None:
    """Log chunk plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_chunks: Total number of chunks planned
        total_identifiers: Number of identifiers requested
        max_per_request: Maximum identifiers per chunk
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_chunks": total_chunks,
            "total_identifiers": total_identifiers,
            "max_per_request": max_per_request,
        },
    )


def log_chunk_completed(
    *,
    endpoint_id: str,
    chunk_index: int,
    identifiers: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk
        identifiers: Number of identifiers sent in this chunk
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "chunk_completed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "identifiers": identifiers,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    endpoint_id: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunk execution.

    Args:
        endpoint_id: Endpoint identifier
        result: ChunkResult from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "endpoint_id": endpoint_id,
            "chunks_used": result.chunks_used,
            "total_identifiers": result.total_identifiers,
            "results": len(result.data),
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(*, endpoint_id: str, plan: ChunkPlan, error: BaseException) -> None:
    """Log the chunk that aborted a bulk request.

    Identifiers after this chunk were never sent.
    """
    logger.error(
        "chunk_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": plan.chunk_index,
            "start": plan.start,
            "identifiers": plan.size,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )
