"""User profile models."""

from __future__ import annotations

from pydantic import Field

from .common import Followers, Image, WebAPIModel


class PublicUser(WebAPIModel):
    id: str
    display_name: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    followers: Followers | None = None
    images: list[Image] = Field(default_factory=list)
    type: str = "user"


class PrivateUser(PublicUser):
    """Profile of the token owner.

    ``email`` needs the user-read-email scope; ``country`` and ``product``
    need user-read-private.
    """

    email: str | None = None
    country: str | None = None
    product: str | None = None
