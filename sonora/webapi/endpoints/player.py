"""Endpoint for the current user's listening history."""

from __future__ import annotations

from ..core.enums import ItemKind, Scope
from ..models import PlayHistory
from ..runtime.paging import CursorPage
from .base import Endpoint


class PlayerAPI(Endpoint):
    async def get_recently_played(
        self,
        limit: int | None = None,
        before: int | None = None,
        after: int | None = None,
    ) -> CursorPage[PlayHistory]:
        """Get tracks recently played by the current user.

        Requires the user-read-recently-played scope.

        Args:
            limit: Number of items per page (1-50, default from options)
            before: Unix timestamp in ms; return items played before it
            after: Unix timestamp in ms; return items played after it

        Raises:
            ValueError: If both before and after are given
        """
        if before is not None and after is not None:
            raise ValueError("Only one of before and after may be given")
        self.api.require_scopes(Scope.USER_READ_RECENTLY_PLAYED)
        return await self.api.get_cursor_page(
            "/me/player/recently-played",
            ItemKind.PLAY_HISTORY,
            params={"limit": self._limit(limit), "before": before, "after": after},
        )
