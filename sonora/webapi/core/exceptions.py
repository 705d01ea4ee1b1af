"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import ItemKind, PagingStyle, Scope, TraversalDirection


class WebAPIError(Exception):
    """Base exception for all library errors."""

    pass


class MissingScopeError(WebAPIError):
    """The active credential lacks scopes required by an operation.

    Raised before any request is issued.
    """

    def __init__(self, missing: Iterable[Scope], *, any_of: bool = False) -> None:
        self.missing = frozenset(missing)
        self.any_of = any_of
        names = ", ".join(sorted(scope.value for scope in self.missing))
        if any_of:
            message = f"Missing scopes: at least one of [{names}] is required"
        else:
            message = f"Missing scopes: [{names}] are required"
        super().__init__(message)


class TooManyIdentifiersError(WebAPIError):
    """More identifiers were passed than one request accepts and bulk chunking is off."""

    def __init__(self, max_per_request: int, requested: int) -> None:
        super().__init__(
            f"Too many ids ({requested}) provided, only {max_per_request} allowed "
            "(enable allow_bulk_requests to split the call into several requests)"
        )
        self.max_per_request = max_per_request
        self.requested = requested


class UnsupportedDirectionError(WebAPIError):
    """Traversal requested in a direction the page type cannot go."""

    def __init__(self, direction: TraversalDirection, page_type: str) -> None:
        super().__init__(f"{page_type} can only be traversed forwards, not {direction.value}")
        self.direction = direction


class UnrecognizedItemKindError(WebAPIError):
    """No decoder is registered for an item kind.

    Indicates a library/service schema mismatch; never retried.
    """

    def __init__(
        self,
        kind: ItemKind | str,
        style: PagingStyle,
        href: str | None = None,
    ) -> None:
        kind_name = getattr(kind, "value", kind)
        location = f" in {href} response" if href else ""
        super().__init__(f"Unknown {style.value} page item kind '{kind_name}'{location}")
        self.kind = kind
        self.style = style
        self.href = href


class PageDecodeError(WebAPIError):
    """A response body does not match the expected paging schema."""

    pass


class ValidationError(WebAPIError):
    """Data validation failure."""

    pass


class RemoteRequestFailed(WebAPIError):
    """Request to the Web API failed."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(RemoteRequestFailed):
    """Web API rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after
