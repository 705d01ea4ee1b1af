"""Show and episode models."""

from __future__ import annotations

from pydantic import Field

from .common import Image, ResumePoint, WebAPIModel


class SimpleShow(WebAPIModel):
    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    description: str | None = None
    publisher: str | None = None
    explicit: bool = False
    images: list[Image] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    media_type: str | None = None
    total_episodes: int | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    type: str = "show"


class SavedShow(WebAPIModel):
    added_at: str
    show: SimpleShow


class Episode(WebAPIModel):
    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    description: str | None = None
    duration_ms: int | None = None
    explicit: bool = False
    images: list[Image] = Field(default_factory=list)
    language: str | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    resume_point: ResumePoint | None = None
    show: SimpleShow | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    type: str = "episode"


class SavedEpisode(WebAPIModel):
    added_at: str
    episode: Episode
