"""Runtime components: paging engine, bulk chunking, scope guard and HTTP transport."""

from .chunking import (
    ChunkExecutor,
    ChunkPlan,
    ChunkPlanner,
    ChunkPolicy,
    ChunkResult,
    check_bulk_size,
    chunked_request,
)
from .paging import (
    AbstractPage,
    CursorPage,
    DecoderRegistry,
    ItemDecoder,
    Page,
    PageRequester,
    flatten_items,
    get_decoder_registry,
)
from .rest import HTTPClient
from .scopes import ScopeGuard, require_scopes

__all__ = [
    "AbstractPage",
    "Page",
    "CursorPage",
    "PageRequester",
    "flatten_items",
    "ItemDecoder",
    "DecoderRegistry",
    "get_decoder_registry",
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "ChunkExecutor",
    "check_bulk_size",
    "chunked_request",
    "ScopeGuard",
    "require_scopes",
    "HTTPClient",
]
