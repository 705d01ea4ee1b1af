"""Traversable page objects.

Architecture:
    A page is one fetched slice of a larger ordered result set. It behaves
    as a read-only sequence of its items and knows how to fetch the pages
    adjacent to it through the requester it was decoded with.

    - Page: offset-based, traversable forwards and backwards
    - CursorPage: cursor-based, traversable forwards only

Design Decisions:
    - Frozen dataclasses: traversal always returns new pages, never mutates
    - Requester and item kind are constructor arguments, so a page that
      cannot be traversed cannot be built
    - next/previous URLs are used verbatim; they already encode all query
      state (sort, filters, market), so the client never rebuilds them
    - Traversal is an iterative async generator: one round trip per step,
      strictly sequential, no recursion on long chains
    - Walks stop at the first href that was already collected; some
      endpoints return a self-referential ``next`` on the last page

See Also:
    - DecoderRegistry: builds pages from response bodies
    - flatten_items: concatenates the items of collected pages
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import AsyncIterator, Iterable, Iterator, Sequence
from contextlib import aclosing
from dataclasses import dataclass, field
from time import perf_counter
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Protocol, Self, TypeVar, overload

from ...core.enums import ItemKind, TraversalDirection
from ...core.exceptions import UnsupportedDirectionError
from ...models.paging import Cursor
from .telemetry import log_page_fetched, log_pages_collected

if TYPE_CHECKING:
    from .decoders import DecoderRegistry

T = TypeVar("T")


class PageRequester(Protocol):
    """Capability pages use to fetch and decode adjacent pages."""

    decoders: DecoderRegistry

    async def get(self, url: str) -> Any:
        """Issue an authenticated GET and return the decoded JSON body."""
        ...


@dataclass(frozen=True)
class AbstractPage(Sequence[T], Generic[T]):
    """Behaviour shared by offset and cursor pages.

    Attributes:
        href: Link to the endpoint returning the full result of the request
        items: Requested data
        limit: Maximum number of items in the response
        item_kind: Tag selecting the decoder for adjacent pages
        requester: Capability used to fetch adjacent pages
        next: URL of the next page (None if none)
    """

    href: str
    items: tuple[T, ...] = field(hash=False)
    limit: int
    item_kind: ItemKind
    requester: PageRequester = field(repr=False, compare=False)
    next: str | None = None

    _bidirectional: ClassVar[bool] = True

    # Sequence view over items

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items

    # Traversal

    @abstractmethod
    def _url_for(self, direction: TraversalDirection) -> str | None:
        """URL of the adjacent page in ``direction``, or None."""

    @abstractmethod
    def _decode(self, body: Any) -> Self:
        """Build a page of the same kind from a response body."""

    async def get(self, direction: TraversalDirection) -> Self | None:
        """Fetch the adjacent page in ``direction``.

        Issues exactly one request, or none when the service reported no
        page in that direction.
        """
        url = self._url_for(direction)
        if url is None:
            return None
        return await self._fetch(url, direction)

    async def next_page(self) -> Self | None:
        return await self.get(TraversalDirection.FORWARDS)

    async def previous_page(self) -> Self | None:
        return await self.get(TraversalDirection.BACKWARDS)

    async def _fetch(self, url: str, direction: TraversalDirection) -> Self:
        start = perf_counter()
        body = await self.requester.get(url)
        page = self._decode(body)
        log_page_fetched(
            direction=direction,
            url=url,
            item_count=len(page.items),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page

    async def _walk(self, direction: TraversalDirection, seen: set[str]) -> AsyncIterator[Self]:
        """Yield successive pages in ``direction``, excluding this page.

        ``seen`` holds hrefs already collected by the caller and is updated
        in place. A link to a seen href ends the walk without a request; a
        fetched page whose href was seen is dropped and ends the walk.
        """
        current = self
        while True:
            url = current._url_for(direction)
            if url is None or url in seen:
                return
            current = await current._fetch(url, direction)
            if current.href in seen:
                return
            seen.add(current.href)
            yield current

    def iter_forward(self) -> AsyncIterator[Self]:
        """Lazily iterate over the pages after this one."""
        return self._walk(TraversalDirection.FORWARDS, {self.href})

    def iter_backward(self) -> AsyncIterator[Self]:
        """Lazily iterate over the pages before this one, nearest first."""
        return self._walk(TraversalDirection.BACKWARDS, {self.href})

    async def collect_forward(self, max_count: int | None = None) -> list[Self]:
        """Collect this page and up to ``max_count - 1`` following pages.

        Args:
            max_count: Maximum number of pages to return, this page included
                (None = follow ``next`` until exhausted)

        Returns:
            Pages in traversal order, de-duplicated by href

        Raises:
            ValueError: If max_count is smaller than 1
        """
        if max_count is not None and max_count < 1:
            raise ValueError("max_count must be at least 1")

        pages: list[Self] = [self]
        if max_count is None or max_count > 1:
            async with aclosing(self.iter_forward()) as walk:
                async for page in walk:
                    pages.append(page)
                    if max_count is not None and len(pages) >= max_count:
                        break

        log_pages_collected(
            href=self.href,
            pages=len(pages),
            items=sum(len(page.items) for page in pages),
            bounded=max_count is not None,
        )
        return pages

    async def collect_all(self) -> list[Self]:
        """Collect every page of the result set this page belongs to.

        Walks back to the first page, then forward to the last one. Both walks
        share one href set, so no page appears twice. Cursor pages only walk
        forward.
        """
        seen = {self.href}
        before: list[Self] = []
        if self._bidirectional:
            before = [page async for page in self._walk(TraversalDirection.BACKWARDS, seen)]
            before.reverse()
        after = [page async for page in self._walk(TraversalDirection.FORWARDS, seen)]

        pages = [*before, self, *after]
        log_pages_collected(
            href=self.href,
            pages=len(pages),
            items=sum(len(page.items) for page in pages),
            bounded=False,
        )
        return pages

    async def all_items(self) -> list[T]:
        """Items of every page in the result set, in order."""
        return flatten_items(await self.collect_all())


@dataclass(frozen=True)
class Page(AbstractPage[T]):
    """Offset-based page.

    Attributes:
        previous: URL of the previous page (None if none)
        offset: Offset of the items returned
        total: Total number of items available
    """

    previous: str | None = None
    offset: int = 0
    total: int = 0

    def _url_for(self, direction: TraversalDirection) -> str | None:
        return self.next if direction is TraversalDirection.FORWARDS else self.previous

    def _decode(self, body: Any) -> Self:
        return self.requester.decoders.decode_page(body, self.item_kind, self.requester)


@dataclass(frozen=True)
class CursorPage(AbstractPage[T]):
    """Cursor-based page; the service only links forwards.

    Attributes:
        cursor: Keys the service uses to locate adjacent pages
        total: Total number of items, when the endpoint reports it
    """

    cursor: Cursor = field(default_factory=Cursor)
    total: int | None = None

    _bidirectional: ClassVar[bool] = False

    def _url_for(self, direction: TraversalDirection) -> str | None:
        if direction is TraversalDirection.BACKWARDS:
            raise UnsupportedDirectionError(direction, type(self).__name__)
        return self.next

    def iter_backward(self) -> AsyncIterator[Self]:
        raise UnsupportedDirectionError(TraversalDirection.BACKWARDS, type(self).__name__)

    def _decode(self, body: Any) -> Self:
        return self.requester.decoders.decode_cursor_page(body, self.item_kind, self.requester)


def flatten_items(pages: Iterable[AbstractPage[T]]) -> list[T]:
    """Concatenate the items of ``pages`` in encounter order.

    No item-level de-duplication is done.
    """
    items: list[T] = []
    for page in pages:
        items.extend(page.items)
    return items
