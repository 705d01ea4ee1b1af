"""Unit tests for the profile and player endpoints."""

from __future__ import annotations

import pytest

from sonora.webapi import CursorPage, MissingScopeError, PlayHistory, PrivateUser, Scope


class TestProfile:
    """Test the current user profile."""

    @pytest.mark.asyncio
    async def test_get_current_user(self, make_api, mock_http):
        api = make_api(scopes=[])
        mock_http.get.return_value = {
            "id": "me",
            "display_name": "Me",
            "country": "SE",
            "product": "premium",
        }

        user = await api.profile.get_current_user()

        mock_http.get.assert_awaited_once_with("/me", params=None)
        assert isinstance(user, PrivateUser)
        assert user.id == "me"
        assert user.country == "SE"


class TestRecentlyPlayed:
    """Test the recently played cursor page."""

    @pytest.mark.asyncio
    async def test_get_recently_played(self, make_api, mock_http):
        api = make_api()
        mock_http.get.return_value = {
            "href": "https://api.test/v1/me/player/recently-played?limit=1",
            "items": [
                {"track": {"id": "t1", "name": "Song"}, "played_at": "2024-05-01T10:00:00Z"}
            ],
            "limit": 1,
            "next": None,
            "cursors": {"after": "1714557600000", "before": "1714557600000"},
        }

        page = await api.player.get_recently_played(limit=1, after=1714550000000)

        mock_http.get.assert_awaited_once_with(
            "/me/player/recently-played",
            params={"limit": 1, "before": None, "after": 1714550000000},
        )
        assert isinstance(page, CursorPage)
        assert isinstance(page[0], PlayHistory)
        assert page[0].track.id == "t1"
        assert await page.next_page() is None

    @pytest.mark.asyncio
    async def test_before_and_after_are_exclusive(self, make_api, mock_http):
        api = make_api()

        with pytest.raises(ValueError):
            await api.player.get_recently_played(before=1, after=2)
        mock_http.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_requires_recently_played(self, make_api, mock_http):
        api = make_api(scopes=[Scope.USER_TOP_READ])

        with pytest.raises(MissingScopeError):
            await api.player.get_recently_played()
