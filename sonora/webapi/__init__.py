"""Sonora Web API - typed asyncio client for the Spotify Web API."""

from .api import WebAPI
from .config import ClientOptions
from .core import (
    ItemKind,
    LibraryType,
    MissingScopeError,
    PageDecodeError,
    PagingStyle,
    RateLimitError,
    RemoteRequestFailed,
    Scope,
    TimeRange,
    Token,
    TooManyIdentifiersError,
    TraversalDirection,
    UnrecognizedItemKindError,
    UnsupportedDirectionError,
    ValidationError,
    WebAPIError,
)
from .models import (
    Artist,
    Category,
    Cursor,
    Episode,
    PlayHistory,
    PlaylistTrack,
    PrivateUser,
    PublicUser,
    SavedAlbum,
    SavedEpisode,
    SavedShow,
    SavedTrack,
    SimpleAlbum,
    SimpleArtist,
    SimplePlaylist,
    SimpleShow,
    SimpleTrack,
    Track,
)
from .runtime import (
    CursorPage,
    DecoderRegistry,
    ItemDecoder,
    Page,
    chunked_request,
    check_bulk_size,
    flatten_items,
    get_decoder_registry,
    require_scopes,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "WebAPI",
    "ClientOptions",
    "Token",
    # Enums
    "Scope",
    "ItemKind",
    "PagingStyle",
    "TraversalDirection",
    "LibraryType",
    "TimeRange",
    # Paging
    "Page",
    "CursorPage",
    "Cursor",
    "flatten_items",
    "ItemDecoder",
    "DecoderRegistry",
    "get_decoder_registry",
    # Bulk and scopes
    "check_bulk_size",
    "chunked_request",
    "require_scopes",
    # Models
    "SimpleTrack",
    "Track",
    "SavedTrack",
    "PlaylistTrack",
    "PlayHistory",
    "SimpleAlbum",
    "SavedAlbum",
    "SimpleArtist",
    "Artist",
    "SimpleShow",
    "SavedShow",
    "Episode",
    "SavedEpisode",
    "SimplePlaylist",
    "Category",
    "PublicUser",
    "PrivateUser",
    # Exceptions
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
