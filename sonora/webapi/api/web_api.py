"""Ergonomic WebAPI facade for the music-streaming Web API.

The WebAPI owns the HTTP client, the active token and the decoder registry,
and exposes endpoint groups (library, following, ...) as attributes. It is
also the requester every page is bound to, so pages it returns can fetch
their neighbours through it.

Architecture:
    This module implements the Facade pattern over the runtime layer:
    - Request Executor: HTTPClient (aiohttp) with bearer authentication
    - Page Decoder: DecoderRegistry (ItemKind -> item model)
    - Scope Guard: local check of the token's granted scopes
    - Bulk chunking: opt-in splitting of oversized id lists

Design Decisions:
    - HTTP client and registry injection for testing
    - Local preconditions (scopes, bulk size) fail before any I/O
    - Remote failures propagate unchanged; nothing is retried
    - Context manager pattern ensures the HTTP session is closed

See Also:
    - Page / CursorPage: traversal over paginated results
    - ChunkPlanner / ChunkExecutor: bulk request splitting
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from ..config import MAX_IDS_PER_REQUEST, ClientOptions
from ..core.credentials import Token
from ..core.enums import ItemKind, Scope
from ..endpoints import (
    EpisodeAPI,
    FollowingAPI,
    LibraryAPI,
    PersonalizationAPI,
    PlayerAPI,
    ProfileAPI,
)
from ..runtime.chunking import check_bulk_size, chunked_request
from ..runtime.paging import CursorPage, DecoderRegistry, Page, get_decoder_registry
from ..runtime.rest import HTTPClient
from ..runtime.scopes import ScopeGuard

R = TypeVar("R")

logger = logging.getLogger(__name__)


class WebAPI:
    """Entry point for authenticated Web API access.

    Example:
        >>> token = Token.with_scopes("BQD...", [Scope.USER_LIBRARY_READ])
        >>> async with WebAPI(token=token) as api:
        ...     page = await api.library.get_saved_tracks(limit=20)
        ...     saved = await page.all_items()
        ...
        ...     flags = await api.library.contains(LibraryType.TRACK, *track_ids)
    """

    def __init__(
        self,
        *,
        token: Token | None = None,
        options: ClientOptions | None = None,
        http: HTTPClient | None = None,
        decoders: DecoderRegistry | None = None,
    ) -> None:
        """Initialize the WebAPI.

        Args:
            token: Access token with its granted scopes (None = no scopes)
            options: Client options (default ClientOptions())
            http: Optional HTTP client (created from options if not provided)
            decoders: Optional decoder registry (default global registry)
        """
        self.options = options or ClientOptions()
        self._owns_http = http is None
        self._http = http or HTTPClient(base_url=self.options.api_root, timeout=self.options.timeout)
        self.decoders = decoders or get_decoder_registry()
        self._token: Token | None = None
        self._scopes = ScopeGuard()
        self.set_token(token)

        self.library = LibraryAPI(self)
        self.following = FollowingAPI(self)
        self.personalization = PersonalizationAPI(self)
        self.episodes = EpisodeAPI(self)
        self.profile = ProfileAPI(self)
        self.player = PlayerAPI(self)

    @property
    def token(self) -> Token | None:
        return self._token

    @property
    def granted_scopes(self) -> frozenset[Scope]:
        return self._scopes.granted

    def set_token(self, token: Token | None) -> None:
        """Replace the active token, e.g. after the caller refreshed it."""
        self._token = token
        self._scopes = ScopeGuard(token.scopes if token else ())
        logger.debug(
            "token_set",
            extra={"scopes": sorted(scope.value for scope in self._scopes.granted)},
        )
        if token is None:
            self._http.set_header("Authorization", None)
        else:
            self._http.set_header("Authorization", token.authorization_header["Authorization"])

    # Preconditions

    def require_scopes(self, *scopes: Scope, any_of: bool = False) -> None:
        """Raise MissingScopeError unless the token grants ``scopes``."""
        self._scopes.require(*scopes, any_of=any_of)

    def check_bulk_size(self, max_per_request: int, requested_count: int) -> None:
        """Raise TooManyIdentifiersError if bulk requests are off and the count is too large."""
        check_bulk_size(max_per_request, requested_count, self.options.allow_bulk_requests)

    async def bulk_request(
        self,
        identifiers: Sequence[str],
        per_chunk: Callable[[list[str]], Awaitable[Sequence[R] | None]],
        *,
        max_per_request: int = MAX_IDS_PER_REQUEST,
        endpoint_id: str = "unknown",
    ) -> list[R]:
        """Check the bulk size, then run ``per_chunk`` once per chunk of ids."""
        self.check_bulk_size(max_per_request, len(identifiers))
        return await chunked_request(
            max_per_request, identifiers, per_chunk, endpoint_id=endpoint_id
        )

    # Request Executor

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        return await self._http.get(url, params=params)

    async def put(
        self, url: str, params: dict[str, Any] | None = None, json_body: Any = None
    ) -> Any:
        return await self._http.put(url, params=params, json_body=json_body)

    async def post(
        self, url: str, params: dict[str, Any] | None = None, json_body: Any = None
    ) -> Any:
        return await self._http.post(url, params=params, json_body=json_body)

    async def delete(
        self, url: str, params: dict[str, Any] | None = None, json_body: Any = None
    ) -> Any:
        return await self._http.delete(url, params=params, json_body=json_body)

    # Paging

    async def get_page(
        self, url: str, kind: ItemKind, params: dict[str, Any] | None = None
    ) -> Page[Any]:
        """GET an offset paging object and bind it to this requester."""
        body = await self.get(url, params=params)
        return self.decoders.decode_page(body, kind, self)

    async def get_cursor_page(
        self, url: str, kind: ItemKind, params: dict[str, Any] | None = None
    ) -> CursorPage[Any]:
        """GET a cursor paging object and bind it to this requester."""
        body = await self.get(url, params=params)
        return self.decoders.decode_cursor_page(body, kind, self)

    # Lifecycle

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> WebAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
