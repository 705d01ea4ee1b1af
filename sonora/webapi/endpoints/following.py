"""Endpoints for following users, artists and playlists."""

from __future__ import annotations

from ..config import MAX_PLAYLIST_FOLLOWER_IDS
from ..core.enums import ItemKind, Scope
from ..models import Artist
from ..runtime.paging import CursorPage
from ..utils.uris import extract_id, extract_ids
from .base import Endpoint

_PLAYLIST_MODIFY = (Scope.PLAYLIST_MODIFY_PUBLIC, Scope.PLAYLIST_MODIFY_PRIVATE)


class FollowingAPI(Endpoint):
    """Manage the artists, users and playlists the current user follows."""

    async def is_following_user(self, user: str) -> bool:
        """Check whether the current user follows ``user``.

        Requires the user-follow-read scope.
        """
        return (await self.is_following_users(user))[0]

    async def is_following_users(self, *users: str) -> list[bool]:
        """Check whether the current user follows each of ``users`` (at most 50 per request).

        Requires the user-follow-read scope.
        """
        self.api.require_scopes(Scope.USER_FOLLOW_READ)
        return await self._contains("user", extract_ids(users, "user"))

    async def is_following_artist(self, artist: str) -> bool:
        return (await self.is_following_artists(artist))[0]

    async def is_following_artists(self, *artists: str) -> list[bool]:
        """Check whether the current user follows each of ``artists`` (at most 50 per request).

        Requires the user-follow-read scope.
        """
        self.api.require_scopes(Scope.USER_FOLLOW_READ)
        return await self._contains("artist", extract_ids(artists, "artist"))

    async def is_following_playlist(self, playlist: str) -> bool:
        """Check whether the current user follows ``playlist``.

        Private playlists are only reported as followed when the token
        grants playlist-read-private.
        """
        playlist_id = extract_id(playlist, "playlist")
        flags = await self.api.get(f"/playlists/{playlist_id}/followers/contains")
        return bool(flags[0])

    async def are_following_playlist(self, playlist: str, *users: str) -> list[bool]:
        """Check whether each of ``users`` follows ``playlist``.

        Private follows are reported as not following. At most 5 users per
        request unless bulk requests are enabled.
        """
        playlist_id = extract_id(playlist, "playlist")

        async def per_chunk(chunk: list[str]) -> list[bool]:
            return await self.api.get(
                f"/playlists/{playlist_id}/followers/contains",
                params={"ids": ",".join(chunk)},
            )

        return await self.api.bulk_request(
            extract_ids(users, "user"),
            per_chunk,
            max_per_request=MAX_PLAYLIST_FOLLOWER_IDS,
            endpoint_id="following.playlist.contains",
        )

    async def get_followed_artists(
        self,
        limit: int | None = None,
        after: str | None = None,
    ) -> CursorPage[Artist]:
        """Get the artists followed by the current user.

        Requires the user-follow-read scope.

        Args:
            limit: Number of items per page (1-50, default from options)
            after: Last artist id of the previous page

        Returns:
            Cursor page of Artist; traverse with ``next_page()``/``collect_all()``
        """
        self.api.require_scopes(Scope.USER_FOLLOW_READ)
        return await self.api.get_cursor_page(
            "/me/following",
            ItemKind.ARTIST,
            params={"type": "artist", "limit": self._limit(limit), "after": after},
        )

    async def follow_user(self, user: str) -> None:
        await self.follow_users(user)

    async def follow_users(self, *users: str) -> None:
        """Follow ``users``. Requires the user-follow-modify scope."""
        self.api.require_scopes(Scope.USER_FOLLOW_MODIFY)
        await self._modify("PUT", "user", extract_ids(users, "user"))

    async def follow_artist(self, artist: str) -> None:
        await self.follow_artists(artist)

    async def follow_artists(self, *artists: str) -> None:
        """Follow ``artists``. Requires the user-follow-modify scope."""
        self.api.require_scopes(Scope.USER_FOLLOW_MODIFY)
        await self._modify("PUT", "artist", extract_ids(artists, "artist"))

    async def unfollow_user(self, user: str) -> None:
        await self.unfollow_users(user)

    async def unfollow_users(self, *users: str) -> None:
        """Unfollow ``users``. Requires the user-follow-modify scope."""
        self.api.require_scopes(Scope.USER_FOLLOW_MODIFY)
        await self._modify("DELETE", "user", extract_ids(users, "user"))

    async def unfollow_artist(self, artist: str) -> None:
        await self.unfollow_artists(artist)

    async def unfollow_artists(self, *artists: str) -> None:
        """Unfollow ``artists``. Requires the user-follow-modify scope."""
        self.api.require_scopes(Scope.USER_FOLLOW_MODIFY)
        await self._modify("DELETE", "artist", extract_ids(artists, "artist"))

    async def follow_playlist(self, playlist: str, public: bool = True) -> None:
        """Follow ``playlist``.

        Requires playlist-modify-public or playlist-modify-private; following
        publicly needs the former, privately the latter.

        Args:
            playlist: Playlist id, URI or share link
            public: Whether the playlist shows up on the user's public profile
        """
        self.api.require_scopes(*_PLAYLIST_MODIFY, any_of=True)
        playlist_id = extract_id(playlist, "playlist")
        await self.api.put(f"/playlists/{playlist_id}/followers", json_body={"public": public})

    async def unfollow_playlist(self, playlist: str) -> None:
        """Unfollow ``playlist``.

        Requires playlist-modify-public or playlist-modify-private.
        """
        self.api.require_scopes(*_PLAYLIST_MODIFY, any_of=True)
        playlist_id = extract_id(playlist, "playlist")
        await self.api.delete(f"/playlists/{playlist_id}/followers")

    async def _contains(self, follow_type: str, ids: list[str]) -> list[bool]:
        async def per_chunk(chunk: list[str]) -> list[bool]:
            return await self.api.get(
                "/me/following/contains",
                params={"type": follow_type, "ids": ",".join(chunk)},
            )

        return await self.api.bulk_request(
            ids, per_chunk, endpoint_id=f"following.{follow_type}.contains"
        )

    async def _modify(self, method: str, follow_type: str, ids: list[str]) -> None:
        send = self.api.put if method == "PUT" else self.api.delete

        async def per_chunk(chunk: list[str]) -> None:
            await send("/me/following", params={"type": follow_type, "ids": ",".join(chunk)})

        await self.api.bulk_request(
            ids, per_chunk, endpoint_id=f"following.{follow_type}.{method.lower()}"
        )
