"""Chunk execution logic for issuing and reassembling bulk requests.

This module provides the ChunkExecutor class that executes chunk plans
one at a time and concatenates their results in plan order.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter
from typing import Any, TypeVar

from ...core.exceptions import ValidationError
from .definitions import ChunkPlan, ChunkPolicy, ChunkResult
from .planners import ChunkPlanner
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

R = TypeVar("R")


class ChunkExecutor:
    """Executes chunk plans and aggregates results.

    Chunks run strictly in sequence. The first failing chunk aborts the
    whole operation: its error is logged and re-raised unchanged, and no
    partial result is returned.
    """

    def __init__(self, endpoint_id: str = "unknown") -> None:
        """Initialize chunk executor.

        Args:
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._endpoint_id = endpoint_id

    async def execute(
        self,
        *,
        plans: list[ChunkPlan],
        fetch_chunk: Callable[[ChunkPlan], Awaitable[Sequence[Any] | None]],
    ) -> ChunkResult:
        """Execute chunk plans and concatenate results.

        Args:
            plans: List of chunk plans to execute
            fetch_chunk: Async function that takes a ChunkPlan and returns one
                result per identifier, or None for endpoints with no body

        Returns:
            ChunkResult whose data is aligned with the planned identifiers

        Raises:
            ValidationError: If a chunk returns a different number of results
                than identifiers it was sent
        """
        start = perf_counter()
        result = ChunkResult()

        for plan in plans:
            chunk_start = perf_counter()
            try:
                chunk_data = await fetch_chunk(plan)
            except Exception as e:
                log_chunk_error(endpoint_id=self._endpoint_id, plan=plan, error=e)
                raise
            result.chunks_used += 1
            result.total_identifiers += plan.size

            if chunk_data is not None:
                if len(chunk_data) != plan.size:
                    raise ValidationError(
                        f"Chunk {plan.chunk_index} returned {len(chunk_data)} results "
                        f"for {plan.size} identifiers"
                    )
                result.data.extend(chunk_data)

            log_chunk_completed(
                endpoint_id=self._endpoint_id,
                chunk_index=plan.chunk_index,
                identifiers=plan.size,
                latency_ms=(perf_counter() - chunk_start) * 1000.0,
            )

        log_chunk_execution_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result


async def chunked_request(
    max_per_request: int,
    identifiers: Sequence[str],
    per_chunk: Callable[[list[str]], Awaitable[Sequence[R] | None]],
    *,
    endpoint_id: str = "unknown",
) -> list[R]:
    """Issue one request per chunk of ``identifiers`` and concatenate results.

    Args:
        max_per_request: Maximum identifiers per request
        identifiers: Identifiers in the order results should be returned
        per_chunk: Async function called once per chunk with its identifiers
        endpoint_id: Endpoint identifier used in telemetry

    Returns:
        Results whose positions correspond 1:1 to ``identifiers`` (empty
        when ``per_chunk`` returns None, as write endpoints do)
    """
    policy = ChunkPolicy(max_per_request=max_per_request, allow_bulk_requests=True)
    plans = ChunkPlanner(policy, endpoint_id=endpoint_id).plan(identifiers)

    async def fetch_chunk(plan: ChunkPlan) -> Sequence[R] | None:
        return await per_chunk(list(plan.identifiers))

    result = await ChunkExecutor(endpoint_id=endpoint_id).execute(plans=plans, fetch_chunk=fetch_chunk)
    return result.data
