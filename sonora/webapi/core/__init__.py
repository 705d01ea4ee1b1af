"""Core components."""

from .credentials import Token
from .enums import (
    ItemKind,
    LibraryType,
    PagingStyle,
    Scope,
    TimeRange,
    TraversalDirection,
)
from .exceptions import (
    MissingScopeError,
    PageDecodeError,
    RateLimitError,
    RemoteRequestFailed,
    TooManyIdentifiersError,
    UnrecognizedItemKindError,
    UnsupportedDirectionError,
    ValidationError,
    WebAPIError,
)

__all__ = [
    "Token",
    "Scope",
    "ItemKind",
    "PagingStyle",
    "TraversalDirection",
    "LibraryType",
    "TimeRange",
    "WebAPIError",
    "MissingScopeError",
    "TooManyIdentifiersError",
    "UnsupportedDirectionError",
    "UnrecognizedItemKindError",
    "PageDecodeError",
    "ValidationError",
    "RemoteRequestFailed",
    "RateLimitError",
]
