"""Endpoints for podcast episodes."""

from __future__ import annotations

from ..config import MAX_IDS_PER_REQUEST
from ..core.enums import Scope
from ..core.exceptions import RemoteRequestFailed
from ..models import Episode
from ..utils.uris import extract_id, extract_ids
from .base import Endpoint


class EpisodeAPI(Endpoint):
    """Catalog information for episodes, including the user's resume points."""

    async def get_episode(self, episode: str, market: str | None = None) -> Episode | None:
        """Get one episode, or None if the service does not know it.

        Reading resume points requires the user-read-playback-position scope.
        """
        episode_id = extract_id(episode, "episode")
        try:
            body = await self.api.get(f"/episodes/{episode_id}", params={"market": market})
        except RemoteRequestFailed as e:
            if e.status_code in (400, 404):
                return None
            raise
        return Episode.model_validate(body)

    async def get_episodes(self, *episodes: str, market: str | None = None) -> list[Episode | None]:
        """Get several episodes; unknown ids yield None at their position.

        Requires the user-read-playback-position scope. At most 50 ids per
        request unless bulk requests are enabled.
        """
        self.api.require_scopes(Scope.USER_READ_PLAYBACK_POSITION)
        ids = extract_ids(episodes, "episode")

        async def per_chunk(chunk: list[str]) -> list[Episode | None]:
            body = await self.api.get(
                "/episodes", params={"ids": ",".join(chunk), "market": market}
            )
            return [
                Episode.model_validate(item) if item is not None else None
                for item in body["episodes"]
            ]

        return await self.api.bulk_request(
            ids, per_chunk, max_per_request=MAX_IDS_PER_REQUEST, endpoint_id="episodes.get"
        )
