"""Unit tests for Web API models."""

from __future__ import annotations

import pydantic
import pytest

from sonora.webapi.models import (
    Cursor,
    CursorPagingObject,
    PagingObject,
    PlaylistTrack,
    SavedShow,
    SimpleArtist,
    SimpleTrack,
)


class TestItemModels:
    """Test item models."""

    def test_required_name(self):
        with pytest.raises(pydantic.ValidationError):
            SimpleArtist.model_validate({"id": "a1"})

    def test_models_are_frozen(self):
        artist = SimpleArtist(name="Band")
        with pytest.raises(pydantic.ValidationError):
            artist.name = "Other"

    def test_playlist_track_allows_missing_track(self):
        entry = PlaylistTrack.model_validate({"added_at": "2024-01-01T00:00:00Z", "track": None})
        assert entry.track is None

    def test_dump_returns_wire_payload(self):
        payload = {
            "added_at": "2023-12-24T08:00:00Z",
            "show": {
                "id": "s1",
                "name": "Show",
                "images": [{"url": "https://i.test/1.jpg", "height": 64, "width": 64}],
                "is_externally_hosted": False,
            },
        }

        saved = SavedShow.model_validate(payload)

        assert saved.model_dump(mode="json", exclude_unset=True) == payload


class TestPagingSchemas:
    """Test the raw paging object schemas."""

    def test_offset_paging_defaults(self):
        wire = PagingObject[SimpleTrack].model_validate(
            {"href": "https://api.test/v1/x", "items": [{"name": "One"}], "limit": 20}
        )

        assert wire.offset == 0
        assert wire.total == 0
        assert wire.next is None
        assert isinstance(wire.items[0], SimpleTrack)

    def test_cursor_paging_without_total(self):
        wire = CursorPagingObject[SimpleTrack].model_validate(
            {"href": "https://api.test/v1/x", "items": [], "limit": 20, "cursors": {"after": "k"}}
        )

        assert wire.total is None
        assert wire.cursors == Cursor(after="k")

    def test_missing_limit(self):
        with pytest.raises(pydantic.ValidationError):
            PagingObject[SimpleTrack].model_validate({"href": "https://api.test/v1/x", "items": []})
