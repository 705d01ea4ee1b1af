"""Endpoint groups exposed as attributes of WebAPI."""

from .base import Endpoint
from .episodes import EpisodeAPI
from .following import FollowingAPI
from .library import LibraryAPI
from .personalization import PersonalizationAPI
from .player import PlayerAPI
from .profile import ProfileAPI

__all__ = [
    "Endpoint",
    "LibraryAPI",
    "FollowingAPI",
    "PersonalizationAPI",
    "EpisodeAPI",
    "ProfileAPI",
    "PlayerAPI",
]
