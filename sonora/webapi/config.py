"""Shared Web API constants and client options.

This module centralizes URLs and per-request limits used by the endpoint
groups so the facade can stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass

BASE_URL = "https://api.spotify.com"
API_VERSION_PATH = "/v1"

# Most list/bulk endpoints cap both page size and ids per request at 50
DEFAULT_LIMIT = 50
MAX_IDS_PER_REQUEST = 50
# Playlist follower checks accept fewer user ids per call
MAX_PLAYLIST_FOLLOWER_IDS = 5

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientOptions:
    """Options controlling how the WebAPI facade issues requests.

    Attributes:
        base_url: Scheme and host of the Web API
        default_limit: Page size used when an endpoint call passes no limit
        allow_bulk_requests: Split oversized id lists into several requests
            instead of failing fast with TooManyIdentifiersError
        timeout: Total timeout in seconds applied to every HTTP request
    """

    base_url: str = BASE_URL
    default_limit: int | None = DEFAULT_LIMIT
    allow_bulk_requests: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.default_limit is not None and self.default_limit < 1:
            raise ValueError("default_limit must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")

    @property
    def api_root(self) -> str:
        """Base URL including the API version path."""
        return f"{self.base_url.rstrip('/')}{API_VERSION_PATH}"
