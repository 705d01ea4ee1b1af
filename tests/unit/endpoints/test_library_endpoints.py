"""Unit tests for the library endpoints."""

from __future__ import annotations

import pytest

from sonora.webapi import (
    ItemKind,
    LibraryType,
    MissingScopeError,
    Page,
    SavedTrack,
    Scope,
    TooManyIdentifiersError,
    ValidationError,
)


def saved_tracks_body(next_url: str | None = None) -> dict:
    return {
        "href": "https://api.test/v1/me/tracks?offset=0&limit=20",
        "items": [
            {
                "added_at": "2024-02-10T12:00:00Z",
                "track": {"id": "t1", "name": "First", "artists": [{"name": "Band"}]},
            }
        ],
        "limit": 20,
        "next": next_url,
        "previous": None,
        "offset": 0,
        "total": 1,
    }


class TestSavedItems:
    """Test the saved item listings."""

    @pytest.mark.asyncio
    async def test_get_saved_tracks(self, make_api, mock_http):
        api = make_api()
        mock_http.get.return_value = saved_tracks_body()

        page = await api.library.get_saved_tracks(limit=20, market="SE")

        mock_http.get.assert_awaited_once_with(
            "/me/tracks", params={"limit": 20, "offset": None, "market": "SE"}
        )
        assert isinstance(page, Page)
        assert page.item_kind is ItemKind.SAVED_TRACK
        assert isinstance(page[0], SavedTrack)
        assert page[0].track.artists[0].name == "Band"

    @pytest.mark.asyncio
    async def test_default_limit_from_options(self, make_api, mock_http):
        api = make_api(default_limit=10)
        mock_http.get.return_value = saved_tracks_body()

        await api.library.get_saved_tracks()

        assert mock_http.get.await_args.kwargs["params"]["limit"] == 10

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path", "kind"),
        [
            ("get_saved_albums", "/me/albums", ItemKind.SAVED_ALBUM),
            ("get_saved_shows", "/me/shows", ItemKind.SAVED_SHOW),
            ("get_saved_episodes", "/me/episodes", ItemKind.SAVED_EPISODE),
        ],
    )
    async def test_other_listings(self, make_api, mock_http, method, path, kind):
        api = make_api()
        body = saved_tracks_body()
        body["items"] = []
        mock_http.get.return_value = body

        page = await getattr(api.library, method)()

        assert mock_http.get.await_args.args == (path,)
        assert page.item_kind is kind
        assert len(page) == 0

    @pytest.mark.asyncio
    async def test_requires_library_read(self, make_api, mock_http):
        api = make_api(scopes=[Scope.USER_LIBRARY_MODIFY])

        with pytest.raises(MissingScopeError) as exc_info:
            await api.library.get_saved_tracks()

        assert exc_info.value.missing == frozenset({Scope.USER_LIBRARY_READ})
        mock_http.get.assert_not_called()


class TestContains:
    """Test library membership checks."""

    @pytest.mark.asyncio
    async def test_contains(self, make_api, mock_http):
        api = make_api()
        mock_http.get.return_value = [True, False]

        flags = await api.library.contains(
            LibraryType.TRACK, "spotify:track:aaa", "https://open.spotify.com/track/bbb"
        )

        assert flags == [True, False]
        mock_http.get.assert_awaited_once_with("/me/tracks/contains", params={"ids": "aaa,bbb"})

    @pytest.mark.asyncio
    async def test_contains_one(self, make_api, mock_http):
        api = make_api()
        mock_http.get.return_value = [True]

        assert await api.library.contains_one(LibraryType.ALBUM, "spotify:album:al1") is True
        mock_http.get.assert_awaited_once_with("/me/albums/contains", params={"ids": "al1"})

    @pytest.mark.asyncio
    async def test_too_many_ids_fails_before_request(self, make_api, mock_http):
        api = make_api()

        with pytest.raises(TooManyIdentifiersError):
            await api.library.contains(LibraryType.ALBUM, *[f"id{i}" for i in range(51)])

        mock_http.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_bulk_contains_is_chunked(self, make_api, mock_http):
        api = make_api(allow_bulk_requests=True)
        ids = [f"id{i}" for i in range(120)]

        async def fake_get(url, params=None):
            return [True] * len(params["ids"].split(","))

        mock_http.get.side_effect = fake_get

        flags = await api.library.contains(LibraryType.TRACK, *ids)

        assert len(flags) == 120
        assert mock_http.get.await_count == 3
        sent = [call.kwargs["params"]["ids"].split(",") for call in mock_http.get.await_args_list]
        assert [len(chunk) for chunk in sent] == [50, 50, 20]
        assert [i for chunk in sent for i in chunk] == ids

    @pytest.mark.asyncio
    async def test_mismatched_uri_type(self, make_api, mock_http):
        api = make_api()

        with pytest.raises(ValidationError):
            await api.library.contains(LibraryType.TRACK, "spotify:album:aaa")

        mock_http.get.assert_not_called()


class TestModifyLibrary:
    """Test saving and removing items."""

    @pytest.mark.asyncio
    async def test_add(self, make_api, mock_http):
        api = make_api()

        await api.library.add(LibraryType.SHOW, "s1", "s2")

        mock_http.put.assert_awaited_once_with(
            "/me/shows", params={"ids": "s1,s2"}, json_body=None
        )

    @pytest.mark.asyncio
    async def test_remove(self, make_api, mock_http):
        api = make_api()

        await api.library.remove(LibraryType.EPISODE, "spotify:episode:e1")

        mock_http.delete.assert_awaited_once_with(
            "/me/episodes", params={"ids": "e1"}, json_body=None
        )

    @pytest.mark.asyncio
    async def test_modify_requires_scope(self, make_api, mock_http):
        api = make_api(scopes=[Scope.USER_LIBRARY_READ])

        with pytest.raises(MissingScopeError):
            await api.library.add(LibraryType.TRACK, "t1")

        mock_http.put.assert_not_called()
