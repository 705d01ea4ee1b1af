"""Base class for endpoint groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..api.web_api import WebAPI


class Endpoint:
    """Group of related endpoint methods sharing one WebAPI."""

    def __init__(self, api: WebAPI) -> None:
        self.api = api

    def _limit(self, limit: int | None) -> int | None:
        """Resolve a page size, falling back to the configured default."""
        return limit if limit is not None else self.api.options.default_limit
