"""Track models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .albums import SimpleAlbum
from .artists import SimpleArtist
from .common import WebAPIModel
from .users import PublicUser


class SimpleTrack(WebAPIModel):
    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    artists: list[SimpleArtist] = Field(default_factory=list)
    duration_ms: int | None = None
    explicit: bool = False
    disc_number: int | None = None
    track_number: int | None = None
    is_local: bool = False
    is_playable: bool | None = None
    preview_url: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    type: str = "track"


class Track(SimpleTrack):
    album: SimpleAlbum | None = None
    popularity: int | None = None
    external_ids: dict[str, str] = Field(default_factory=dict)


class SavedTrack(WebAPIModel):
    added_at: str
    track: Track


class PlaylistTrack(WebAPIModel):
    """Entry of a playlist. ``track`` is None for unavailable or removed tracks."""

    added_at: str | None = None
    added_by: PublicUser | None = None
    is_local: bool = False
    track: Track | None = None


class PlayHistory(WebAPIModel):
    track: Track
    played_at: str
    context: dict[str, Any] | None = None
