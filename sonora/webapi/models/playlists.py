"""Playlist and browse category models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .common import Image, WebAPIModel
from .users import PublicUser


class SimplePlaylist(WebAPIModel):
    id: str
    name: str
    uri: str | None = None
    href: str | None = None
    description: str | None = None
    collaborative: bool = False
    public: bool | None = None
    owner: PublicUser | None = None
    images: list[Image] | None = None
    snapshot_id: str | None = None
    # Reference to the playlist's own track paging endpoint: {"href": ..., "total": ...}
    tracks: dict[str, Any] | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    type: str = "playlist"


class Category(WebAPIModel):
    id: str
    name: str
    href: str | None = None
    icons: list[Image] = Field(default_factory=list)
