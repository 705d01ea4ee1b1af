"""Endpoints for the tracks, albums, shows and episodes saved in a user's library."""

from __future__ import annotations

from ..core.enums import ItemKind, LibraryType, Scope
from ..models import SavedAlbum, SavedEpisode, SavedShow, SavedTrack
from ..runtime.paging import Page
from ..utils.uris import extract_ids
from .base import Endpoint


class LibraryAPI(Endpoint):
    """Retrieve and manage the current user's "Your Music" library."""

    async def get_saved_tracks(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Page[SavedTrack]:
        """Get the songs saved in the current user's library.

        Requires the user-library-read scope.

        Args:
            limit: Number of items per page (1-50, default from options)
            offset: Index of the first item to return
            market: ISO 3166-1 alpha-2 country code for track relinking

        Returns:
            Page of SavedTrack ordered by position in the library
        """
        self.api.require_scopes(Scope.USER_LIBRARY_READ)
        return await self.api.get_page(
            "/me/tracks",
            ItemKind.SAVED_TRACK,
            params={"limit": self._limit(limit), "offset": offset, "market": market},
        )

    async def get_saved_albums(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Page[SavedAlbum]:
        """Get the albums saved in the current user's library.

        Requires the user-library-read scope.
        """
        self.api.require_scopes(Scope.USER_LIBRARY_READ)
        return await self.api.get_page(
            "/me/albums",
            ItemKind.SAVED_ALBUM,
            params={"limit": self._limit(limit), "offset": offset, "market": market},
        )

    async def get_saved_shows(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Page[SavedShow]:
        """Get the shows saved in the current user's library.

        Requires the user-library-read scope.
        """
        self.api.require_scopes(Scope.USER_LIBRARY_READ)
        return await self.api.get_page(
            "/me/shows",
            ItemKind.SAVED_SHOW,
            params={"limit": self._limit(limit), "offset": offset},
        )

    async def get_saved_episodes(
        self,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> Page[SavedEpisode]:
        """Get the episodes saved in the current user's library.

        Requires the user-library-read scope.
        """
        self.api.require_scopes(Scope.USER_LIBRARY_READ)
        return await self.api.get_page(
            "/me/episodes",
            ItemKind.SAVED_EPISODE,
            params={"limit": self._limit(limit), "offset": offset, "market": market},
        )

    async def contains(self, library_type: LibraryType, *ids: str) -> list[bool]:
        """Check whether objects are saved in the current user's library.

        Requires the user-library-read scope. At most 50 ids per request;
        larger lists need ``allow_bulk_requests``.

        Args:
            library_type: Type of the objects
            ids: Ids, URIs or share links of the objects

        Returns:
            One flag per id, in input order

        Raises:
            MissingScopeError: If the token lacks user-library-read
            TooManyIdentifiersError: If more than 50 ids are given and bulk
                requests are disabled
        """
        self.api.require_scopes(Scope.USER_LIBRARY_READ)
        normalized = extract_ids(ids, library_type.uri_type)

        async def per_chunk(chunk: list[str]) -> list[bool]:
            return await self.api.get(
                f"/me/{library_type.value}/contains", params={"ids": ",".join(chunk)}
            )

        return await self.api.bulk_request(
            normalized, per_chunk, endpoint_id=f"library.{library_type.value}.contains"
        )

    async def contains_one(self, library_type: LibraryType, item: str) -> bool:
        """Check whether one object is saved in the current user's library.

        Requires the user-library-read scope.
        """
        return (await self.contains(library_type, item))[0]

    async def add(self, library_type: LibraryType, *ids: str) -> None:
        """Save objects to the current user's library.

        Requires the user-library-modify scope.
        """
        self.api.require_scopes(Scope.USER_LIBRARY_MODIFY)
        normalized = extract_ids(ids, library_type.uri_type)

        async def per_chunk(chunk: list[str]) -> None:
            await self.api.put(f"/me/{library_type.value}", params={"ids": ",".join(chunk)})

        await self.api.bulk_request(
            normalized, per_chunk, endpoint_id=f"library.{library_type.value}.add"
        )

    async def remove(self, library_type: LibraryType, *ids: str) -> None:
        """Remove objects from the current user's library.

        Requires the user-library-modify scope. Changes may not be visible
        in other applications immediately.
        """
        self.api.require_scopes(Scope.USER_LIBRARY_MODIFY)
        normalized = extract_ids(ids, library_type.uri_type)

        async def per_chunk(chunk: list[str]) -> None:
            await self.api.delete(f"/me/{library_type.value}", params={"ids": ",".join(chunk)})

        await self.api.bulk_request(
            normalized, per_chunk, endpoint_id=f"library.{library_type.value}.remove"
        )
