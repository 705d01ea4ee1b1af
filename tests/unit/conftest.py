"""Shared fixtures for unit tests."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import MagicMock

import pytest

from sonora.webapi import ClientOptions, Scope, Token, WebAPI
from sonora.webapi.core import RemoteRequestFailed
from sonora.webapi.runtime.paging import DecoderRegistry, get_decoder_registry
from sonora.webapi.runtime.rest import HTTPClient

API_ROOT = "https://api.test/v1"


class FakeRequester:
    """In-memory page requester recording every URL it is asked for."""

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        decoders: DecoderRegistry | None = None,
    ) -> None:
        self.responses = dict(responses or {})
        self.decoders = decoders or get_decoder_registry()
        self.calls: list[str] = []
        self.stall_urls: set[str] = set()
        self.stalled = asyncio.Event()

    async def get(self, url: str, params: dict[str, Any] | None = None) -> Any:
        self.calls.append(url)
        if url in self.stall_urls:
            self.stalled.set()
            await asyncio.Event().wait()
        if url not in self.responses:
            raise RemoteRequestFailed(f"Unexpected request to {url}", status_code=404)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response


def track(track_id: str) -> dict[str, Any]:
    return {"id": track_id, "name": f"Track {track_id}", "uri": f"spotify:track:{track_id}"}


def paging_body(
    href: str,
    ids: list[str],
    *,
    next: str | None = None,
    previous: str | None = None,
    offset: int = 0,
    limit: int = 2,
    total: int = 6,
) -> dict[str, Any]:
    return {
        "href": href,
        "items": [track(track_id) for track_id in ids],
        "limit": limit,
        "next": next,
        "previous": previous,
        "offset": offset,
        "total": total,
    }


def page_url(offset: int) -> str:
    return f"{API_ROOT}/x?offset={offset}&limit=2"


@pytest.fixture
def make_requester():
    """Factory for FakeRequester instances."""

    def factory(
        responses: dict[str, Any] | None = None, decoders: DecoderRegistry | None = None
    ) -> FakeRequester:
        return FakeRequester(responses, decoders)

    return factory


@pytest.fixture
def three_page_responses() -> dict[str, Any]:
    """Responses for a 6 item result set split into pages of 2."""
    return {
        page_url(0): paging_body(page_url(0), ["a", "b"], next=page_url(2), offset=0),
        page_url(2): paging_body(
            page_url(2), ["c", "d"], next=page_url(4), previous=page_url(0), offset=2
        ),
        page_url(4): paging_body(page_url(4), ["e", "f"], previous=page_url(2), offset=4),
    }


@pytest.fixture
def mock_http() -> MagicMock:
    """HTTPClient double whose request methods are AsyncMocks."""
    http = MagicMock(spec=HTTPClient)
    http.get.return_value = None
    http.put.return_value = None
    http.post.return_value = None
    http.delete.return_value = None
    return http


@pytest.fixture(name="paging_body")
def paging_body_fixture():
    """Builder for offset paging object bodies of simple tracks."""
    return paging_body


@pytest.fixture(name="page_url")
def page_url_fixture():
    """Builder for page URLs of the ``/x`` test collection."""
    return page_url


@pytest.fixture
def make_api(mock_http):
    """Factory for a WebAPI bound to ``mock_http`` with the given scopes."""

    def factory(scopes=tuple(Scope), **options) -> WebAPI:
        return WebAPI(
            token=Token.with_scopes("test-token", scopes),
            options=ClientOptions(base_url="https://api.test", **options),
            http=mock_http,
        )

    return factory
