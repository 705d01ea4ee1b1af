"""Artist models."""

from __future__ import annotations

from pydantic import Field

from .common import Followers, Image, WebAPIModel


class SimpleArtist(WebAPIModel):
    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    type: str = "artist"


class Artist(SimpleArtist):
    followers: Followers | None = None
    genres: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    popularity: int | None = None
