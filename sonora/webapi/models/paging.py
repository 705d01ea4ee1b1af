"""Raw paging object schemas.

These models describe the exact JSON layout of paginated collections as
returned by the Web API, before they are bound to a requester and turned
into traversable Page/CursorPage objects by the decoder registry.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Cursor(BaseModel):
    """Cursor keys used by the service to locate adjacent pages.

    Attributes:
        before: Key for the previous set of items
        after: Key for the next set of items
    """

    before: str | None = None
    after: str | None = None

    model_config = ConfigDict(frozen=True)


class PagingObject(BaseModel, Generic[T]):
    """Offset-based paging object.

    Attributes:
        href: Link to the endpoint returning the full result of the request
        items: Requested data
        limit: Maximum number of items in the response
        next: URL of the next page (None if none)
        previous: URL of the previous page (None if none)
        offset: Offset of the items returned
        total: Total number of items available
    """

    href: str
    items: list[T] = Field(default_factory=list)
    limit: int
    next: str | None = None
    previous: str | None = None
    offset: int = 0
    total: int = 0


class CursorPagingObject(BaseModel, Generic[T]):
    """Cursor-based paging object.

    ``total`` is only present on some endpoints.
    """

    href: str
    items: list[T] = Field(default_factory=list)
    limit: int
    next: str | None = None
    cursors: Cursor = Field(default_factory=Cursor)
    total: int | None = None
