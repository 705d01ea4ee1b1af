"""Shared base model and small value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WebAPIModel(BaseModel):
    """Base for all Web API objects.

    Unknown wire fields are kept (``extra="allow"``) so that dumping a model
    with ``exclude_unset=True`` returns the payload it was decoded from.
    """

    model_config = ConfigDict(frozen=True, extra="allow")


class Image(WebAPIModel):
    url: str
    height: int | None = None
    width: int | None = None


class Followers(WebAPIModel):
    href: str | None = None
    total: int = 0


class ResumePoint(WebAPIModel):
    """Playback position of an episode for the current user."""

    fully_played: bool = False
    resume_position_ms: int = 0
