"""Endpoints for the current user's top artists and tracks."""

from __future__ import annotations

from ..core.enums import ItemKind, Scope, TimeRange
from ..models import Artist, Track
from ..runtime.paging import Page
from .base import Endpoint


class PersonalizationAPI(Endpoint):
    """Top artists and tracks based on calculated affinity.

    Affinity is computed from listening behaviour over one of three time
    ranges and is typically refreshed once a day.
    """

    async def get_top_artists(
        self,
        limit: int | None = None,
        offset: int | None = None,
        time_range: TimeRange | None = None,
    ) -> Page[Artist]:
        """Get the current user's top artists.

        Requires the user-top-read scope.

        Args:
            limit: Number of items per page (1-50, default from options)
            offset: Index of the first item to return
            time_range: Affinity window (service default: medium term)

        Returns:
            Page of Artist sorted by affinity
        """
        self.api.require_scopes(Scope.USER_TOP_READ)
        return await self.api.get_page(
            "/me/top/artists",
            ItemKind.ARTIST,
            params={"limit": self._limit(limit), "offset": offset, "time_range": time_range},
        )

    async def get_top_tracks(
        self,
        limit: int | None = None,
        offset: int | None = None,
        time_range: TimeRange | None = None,
    ) -> Page[Track]:
        """Get the current user's top tracks. Requires the user-top-read scope."""
        self.api.require_scopes(Scope.USER_TOP_READ)
        return await self.api.get_page(
            "/me/top/tracks",
            ItemKind.TRACK,
            params={"limit": self._limit(limit), "offset": offset, "time_range": time_range},
        )
