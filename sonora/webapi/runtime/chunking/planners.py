"""Chunk planning logic for splitting identifier lists.

This module provides the ChunkPlanner class that determines how to split
a bulk request into multiple chunks based on the endpoint's per-request
identifier limit, and the fail-fast size check used when bulk chunking
is disabled.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core.exceptions import TooManyIdentifiersError
from .definitions import ChunkPlan, ChunkPolicy
from .telemetry import log_chunk_plan


def check_bulk_size(
    max_per_request: int,
    requested_count: int,
    allow_bulk_requests: bool = False,
) -> None:
    """Fail fast when more identifiers are requested than one call accepts.

    Bulk chunking is opt-in: unless ``allow_bulk_requests`` is set, an
    oversized request is rejected before any I/O.

    Raises:
        TooManyIdentifiersError: If requested_count exceeds max_per_request
            and bulk requests are not allowed
    """
    if requested_count > max_per_request and not allow_bulk_requests:
        raise TooManyIdentifiersError(max_per_request, requested_count)


class ChunkPlanner:
    """Plans contiguous identifier chunks for bulk requests.

    The planner takes the caller's identifiers and a chunk policy, then
    splits them into chunks of at most ``max_per_request`` identifiers,
    preserving input order.
    """

    def __init__(self, policy: ChunkPolicy, endpoint_id: str = "unknown") -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy for the endpoint
            endpoint_id: Endpoint identifier used in telemetry
        """
        self._policy = policy
        self._endpoint_id = endpoint_id

    def plan(self, identifiers: Sequence[str]) -> list[ChunkPlan]:
        """Plan chunks for a bulk request.

        Args:
            identifiers: Identifiers to send, in the order results are expected

        Returns:
            List of chunk plans (empty when no identifiers are given)

        Raises:
            TooManyIdentifiersError: If the identifiers do not fit in one
                request and the policy does not allow bulk requests
        """
        size = self._policy.max_per_request
        check_bulk_size(size, len(identifiers), self._policy.allow_bulk_requests)

        plans = [
            ChunkPlan(
                identifiers=tuple(identifiers[start : start + size]),
                chunk_index=chunk_index,
                start=start,
            )
            for chunk_index, start in enumerate(range(0, len(identifiers), size))
        ]

        log_chunk_plan(
            endpoint_id=self._endpoint_id,
            total_chunks=len(plans),
            total_identifiers=len(identifiers),
            max_per_request=size,
        )
        return plans
