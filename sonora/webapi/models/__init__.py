"""Data models for Web API objects.

Architecture:
    This module exports all Pydantic v2 data models used throughout the library.
    Item models are immutable (frozen=True) and keep unknown wire fields
    (extra="allow") so a decoded item can be dumped back to the payload it
    came from.

Model Categories:
    - Library: SavedTrack, SavedAlbum, SavedShow, SavedEpisode
    - Catalog: SimpleTrack, Track, SimpleAlbum, SimpleArtist, Artist,
      SimpleShow, Episode, SimplePlaylist, PlaylistTrack, Category
    - Users: PublicUser, PrivateUser, PlayHistory
    - Paging wire schemas: PagingObject, CursorPagingObject, Cursor
"""

from .albums import SavedAlbum, SimpleAlbum
from .artists import Artist, SimpleArtist
from .common import Followers, Image, ResumePoint, WebAPIModel
from .paging import Cursor, CursorPagingObject, PagingObject
from .playlists import Category, SimplePlaylist
from .shows import Episode, SavedEpisode, SavedShow, SimpleShow
from .tracks import PlayHistory, PlaylistTrack, SavedTrack, SimpleTrack, Track
from .users import PrivateUser, PublicUser

__all__ = [
    "WebAPIModel",
    "Image",
    "Followers",
    "ResumePoint",
    "SimpleArtist",
    "Artist",
    "SimpleAlbum",
    "SavedAlbum",
    "SimpleTrack",
    "Track",
    "SavedTrack",
    "PlaylistTrack",
    "PlayHistory",
    "SimpleShow",
    "SavedShow",
    "Episode",
    "SavedEpisode",
    "SimplePlaylist",
    "Category",
    "PublicUser",
    "PrivateUser",
    "Cursor",
    "PagingObject",
    "CursorPagingObject",
]
