"""Lazy traversal over offset and cursor paging objects.

Architecture:
    The paging layer consists of:
    - pages.py: Page / CursorPage value objects and the traversal engine
    - decoders.py: ItemKind -> decoder registry building pages from bodies
    - telemetry.py: Structured logging

Usage:
    Endpoint methods decode a response into a page with
    ``requester.decoders.decode_page(body, ItemKind.TRACK, requester)``.
    Callers then traverse with ``await page.next_page()``,
    ``await page.collect_forward(3)`` or ``await page.all_items()``.
"""

from __future__ import annotations

from .decoders import (
    DecoderRegistry,
    ItemDecoder,
    build_default_registry,
    get_decoder_registry,
)
from .pages import AbstractPage, CursorPage, Page, PageRequester, flatten_items

__all__ = [
    "AbstractPage",
    "Page",
    "CursorPage",
    "PageRequester",
    "flatten_items",
    "ItemDecoder",
    "DecoderRegistry",
    "build_default_registry",
    "get_decoder_registry",
]
