"""Unit tests for chunk planning logic."""

from __future__ import annotations

import pytest

from sonora.webapi.core import TooManyIdentifiersError
from sonora.webapi.runtime.chunking import ChunkPlan, ChunkPlanner, ChunkPolicy, check_bulk_size


def make_ids(count: int) -> list[str]:
    return [f"id{i:03d}" for i in range(count)]


class TestCheckBulkSize:
    """Test the fail-fast bulk size check."""

    def test_within_limit(self):
        check_bulk_size(50, 50)

    def test_over_limit_without_bulk(self):
        with pytest.raises(TooManyIdentifiersError) as exc_info:
            check_bulk_size(50, 51)

        assert exc_info.value.max_per_request == 50
        assert exc_info.value.requested == 51
        assert "51" in str(exc_info.value)
        assert "only 50 allowed" in str(exc_info.value)

    def test_over_limit_with_bulk(self):
        check_bulk_size(50, 500, allow_bulk_requests=True)


class TestChunkPolicy:
    """Test ChunkPolicy validation."""

    def test_defaults(self):
        policy = ChunkPolicy(max_per_request=20)
        assert policy.allow_bulk_requests is False

    @pytest.mark.parametrize("size", [0, -5])
    def test_rejects_non_positive_size(self, size):
        with pytest.raises(ValueError):
            ChunkPolicy(max_per_request=size)


class TestChunkPlanner:
    """Test ChunkPlanner functionality."""

    def test_single_chunk(self):
        planner = ChunkPlanner(ChunkPolicy(max_per_request=50))
        ids = make_ids(10)

        plans = planner.plan(ids)

        assert plans == [ChunkPlan(identifiers=tuple(ids), chunk_index=0, start=0)]

    def test_exact_multiple(self):
        planner = ChunkPlanner(ChunkPolicy(max_per_request=5, allow_bulk_requests=True))

        plans = planner.plan(make_ids(10))

        assert [plan.size for plan in plans] == [5, 5]

    def test_uneven_split_preserves_order(self):
        planner = ChunkPlanner(ChunkPolicy(max_per_request=50, allow_bulk_requests=True))
        ids = make_ids(120)

        plans = planner.plan(ids)

        assert [plan.size for plan in plans] == [50, 50, 20]
        assert [plan.chunk_index for plan in plans] == [0, 1, 2]
        assert [plan.start for plan in plans] == [0, 50, 100]
        assert [i for plan in plans for i in plan.identifiers] == ids

    def test_empty_input(self):
        planner = ChunkPlanner(ChunkPolicy(max_per_request=50))
        assert planner.plan([]) == []

    def test_oversized_without_bulk(self):
        planner = ChunkPlanner(ChunkPolicy(max_per_request=50))

        with pytest.raises(TooManyIdentifiersError):
            planner.plan(make_ids(51))
