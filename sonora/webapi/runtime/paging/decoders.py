"""Page decoders keyed by item kind.

Architecture:
    Each item kind maps to one ItemDecoder that knows the item model and,
    for endpoints that wrap their paging object (``{"albums": {...}}``), the
    key to unwrap. The registry keeps one table per paging style, because
    the same kind (Artist) can come back both as an offset page and as a
    cursor page.

    The decoder for a page is looked up from its explicit ItemKind tag; no
    runtime type inspection of items is done.

See Also:
    - Page / CursorPage: call back into the registry to decode adjacent pages
    - get_decoder_registry: process-wide registry with the built-in kinds
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pydantic
from pydantic import BaseModel

from ...core.enums import ItemKind, PagingStyle
from ...core.exceptions import PageDecodeError, UnrecognizedItemKindError
from ...models import (
    Artist,
    Category,
    CursorPagingObject,
    PagingObject,
    PlayHistory,
    PlaylistTrack,
    SavedAlbum,
    SavedEpisode,
    SavedShow,
    SavedTrack,
    SimpleAlbum,
    SimplePlaylist,
    SimpleTrack,
    Track,
)
from .pages import CursorPage, Page
from .telemetry import log_page_counters_inconsistent, log_page_decoded

if TYPE_CHECKING:
    from .pages import PageRequester


@dataclass(frozen=True)
class ItemDecoder:
    """Decodes paging objects whose items are ``model`` instances.

    Attributes:
        kind: Item kind this decoder is registered under
        model: Pydantic model for a single item
        root_key: Key wrapping the paging object in the response, if any
    """

    kind: ItemKind
    model: type[BaseModel]
    root_key: str | None = None

    def _unwrap(self, body: Any) -> Any:
        if isinstance(body, str | bytes | bytearray):
            try:
                body = json.loads(body)
            except ValueError as e:
                raise PageDecodeError(f"Response body is not valid JSON: {e}") from e
        if self.root_key and isinstance(body, Mapping) and self.root_key in body:
            return body[self.root_key]
        return body

    def decode_offset(self, body: Any) -> PagingObject[Any]:
        try:
            return PagingObject[self.model].model_validate(self._unwrap(body))
        except pydantic.ValidationError as e:
            raise PageDecodeError(
                f"Response does not match {self.kind.value} paging object: {e}"
            ) from e

    def decode_cursor(self, body: Any) -> CursorPagingObject[Any]:
        try:
            return CursorPagingObject[self.model].model_validate(self._unwrap(body))
        except pydantic.ValidationError as e:
            raise PageDecodeError(
                f"Response does not match {self.kind.value} cursor paging object: {e}"
            ) from e


class DecoderRegistry:
    """Registry of item decoders per paging style."""

    def __init__(self) -> None:
        self._decoders: dict[PagingStyle, dict[ItemKind, ItemDecoder]] = {
            style: {} for style in PagingStyle
        }

    def register(self, decoder: ItemDecoder, *, style: PagingStyle = PagingStyle.OFFSET) -> None:
        """Register ``decoder`` for its kind, replacing any previous one."""
        self._decoders[style][decoder.kind] = decoder

    def unregister(self, kind: ItemKind, *, style: PagingStyle = PagingStyle.OFFSET) -> None:
        self._decoders[style].pop(kind, None)

    def get(self, kind: ItemKind, style: PagingStyle, href: str | None = None) -> ItemDecoder:
        """Look up the decoder for ``kind``.

        Raises:
            UnrecognizedItemKindError: If no decoder is registered
        """
        decoder = self._decoders[style].get(kind)
        if decoder is None:
            raise UnrecognizedItemKindError(kind, style, href)
        return decoder

    def supports(self, kind: ItemKind, style: PagingStyle = PagingStyle.OFFSET) -> bool:
        return kind in self._decoders[style]

    def decode_page(self, body: Any, kind: ItemKind, requester: PageRequester) -> Page[Any]:
        """Decode an offset paging object body into a Page bound to ``requester``."""
        wire = self.get(kind, PagingStyle.OFFSET).decode_offset(body)
        page: Page[Any] = Page(
            href=wire.href,
            items=tuple(wire.items),
            limit=wire.limit,
            item_kind=kind,
            requester=requester,
            next=wire.next,
            previous=wire.previous,
            offset=wire.offset,
            total=wire.total,
        )
        _check_counters(page.href, len(page.items), page.limit, page.offset, page.total)
        log_page_decoded(
            kind=kind, style=PagingStyle.OFFSET, href=page.href, item_count=len(page.items)
        )
        return page

    def decode_cursor_page(
        self, body: Any, kind: ItemKind, requester: PageRequester
    ) -> CursorPage[Any]:
        """Decode a cursor paging object body into a CursorPage bound to ``requester``."""
        wire = self.get(kind, PagingStyle.CURSOR).decode_cursor(body)
        page: CursorPage[Any] = CursorPage(
            href=wire.href,
            items=tuple(wire.items),
            limit=wire.limit,
            item_kind=kind,
            requester=requester,
            next=wire.next,
            cursor=wire.cursors,
            total=wire.total,
        )
        _check_counters(page.href, len(page.items), page.limit, None, page.total)
        log_page_decoded(
            kind=kind, style=PagingStyle.CURSOR, href=page.href, item_count=len(page.items)
        )
        return page


def _check_counters(
    href: str, item_count: int, limit: int, offset: int | None, total: int | None
) -> None:
    over_limit = limit > 0 and item_count > limit
    # total == 0 is what the service sends when it does not report a total
    past_total = total is not None and total > 0 and (offset or 0) + item_count > total
    if over_limit or past_total:
        log_page_counters_inconsistent(
            href=href, item_count=item_count, limit=limit, offset=offset, total=total
        )


_OFFSET_DECODERS = (
    ItemDecoder(ItemKind.SIMPLE_TRACK, SimpleTrack),
    ItemDecoder(ItemKind.TRACK, Track),
    ItemDecoder(ItemKind.SIMPLE_ALBUM, SimpleAlbum, root_key="albums"),
    ItemDecoder(ItemKind.SAVED_TRACK, SavedTrack),
    ItemDecoder(ItemKind.SAVED_ALBUM, SavedAlbum),
    ItemDecoder(ItemKind.SAVED_SHOW, SavedShow),
    ItemDecoder(ItemKind.SAVED_EPISODE, SavedEpisode),
    ItemDecoder(ItemKind.ARTIST, Artist),
    ItemDecoder(ItemKind.SIMPLE_PLAYLIST, SimplePlaylist, root_key="playlists"),
    ItemDecoder(ItemKind.PLAYLIST_TRACK, PlaylistTrack),
    ItemDecoder(ItemKind.CATEGORY, Category, root_key="categories"),
)

_CURSOR_DECODERS = (
    ItemDecoder(ItemKind.PLAY_HISTORY, PlayHistory),
    ItemDecoder(ItemKind.ARTIST, Artist, root_key="artists"),
)


def build_default_registry() -> DecoderRegistry:
    """Create a registry populated with every built-in item kind."""
    registry = DecoderRegistry()
    for decoder in _OFFSET_DECODERS:
        registry.register(decoder, style=PagingStyle.OFFSET)
    for decoder in _CURSOR_DECODERS:
        registry.register(decoder, style=PagingStyle.CURSOR)
    return registry


_default_registry: DecoderRegistry | None = None


def get_decoder_registry() -> DecoderRegistry:
    """Get the default global decoder registry, created on first access."""
    global _default_registry
    if _default_registry is None:
        _default_registry = build_default_registry()
    return _default_registry
