"""Structured logging for page decoding and traversal."""

from __future__ import annotations

import logging

from ...core.enums import ItemKind, PagingStyle, TraversalDirection

logger = logging.getLogger(__name__)


def log_page_decoded(*, kind: ItemKind, style: PagingStyle, href: str, item_count: int) -> None:
    logger.debug(
        "page_decoded",
        extra={
            "item_kind": kind.value,
            "paging_style": style.value,
            "href": href,
            "item_count": item_count,
        },
    )


def log_page_counters_inconsistent(
    *,
    href: str,
    item_count: int,
    limit: int,
    offset: int | None,
    total: int | None,
) -> None:
    """Log a page whose counters contradict its contents.

    The service is authoritative, so the page is still returned.
    """
    logger.warning(
        "page_counters_inconsistent",
        extra={
            "href": href,
            "item_count": item_count,
            "limit": limit,
            "offset": offset,
            "total": total,
        },
    )


def log_page_fetched(
    *,
    direction: TraversalDirection,
    url: str,
    item_count: int,
    latency_ms: float | None = None,
) -> None:
    """Log one page transition.

    Args:
        direction: Direction of the transition
        url: URL requested (the service supplied next/previous link)
        item_count: Number of items on the fetched page
        latency_ms: Round trip plus decode latency in milliseconds
    """
    logger.debug(
        "page_fetched",
        extra={
            "direction": direction.value,
            "url": url,
            "item_count": item_count,
            "latency_ms": latency_ms,
        },
    )


def log_pages_collected(*, href: str, pages: int, items: int, bounded: bool) -> None:
    logger.debug(
        "pages_collected",
        extra={
            "href": href,
            "pages": pages,
            "items": items,
            "bounded": bounded,
        },
    )
