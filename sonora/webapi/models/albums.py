"""Album models."""

from __future__ import annotations

from pydantic import Field

from .artists import SimpleArtist
from .common import Image, WebAPIModel


class SimpleAlbum(WebAPIModel):
    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    album_type: str | None = None
    artists: list[SimpleArtist] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    release_date: str | None = None
    release_date_precision: str | None = None
    total_tracks: int | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    type: str = "album"


class SavedAlbum(WebAPIModel):
    """Album saved in the user's library, with the time it was added."""

    added_at: str
    album: SimpleAlbum
