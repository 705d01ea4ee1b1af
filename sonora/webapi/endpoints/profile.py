"""Endpoint for the current user's profile."""

from __future__ import annotations

from ..models import PrivateUser
from .base import Endpoint


class ProfileAPI(Endpoint):
    async def get_current_user(self) -> PrivateUser:
        """Get the profile of the token owner.

        ``email`` is only filled with the user-read-email scope; ``country``
        and ``product`` need user-read-private.
        """
        return PrivateUser.model_validate(await self.api.get("/me"))
