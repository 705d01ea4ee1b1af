"""Core enumerations shared by the paging engine and endpoint groups.

Architecture:
    String enums carry the exact wire values used by the Web API (scope
    names, path segments, query values) so they can be passed straight into
    URLs and compared against token scope strings.

Key Types:
    - Scope: OAuth permission grants checked before a request is issued
    - ItemKind: Tag selecting the decoder for a page's items
    - PagingStyle: Offset-based vs cursor-based paging objects
    - TraversalDirection: Forwards/backwards page traversal
    - LibraryType: Kinds of objects stored in a user's library
    - TimeRange: Affinity window for personalization endpoints
"""

from enum import Enum


class Scope(str, Enum):
    """Permission grants defined by the Web API authorization guide."""

    UGC_IMAGE_UPLOAD = "ugc-image-upload"
    USER_READ_PLAYBACK_STATE = "user-read-playback-state"
    USER_MODIFY_PLAYBACK_STATE = "user-modify-playback-state"
    USER_READ_CURRENTLY_PLAYING = "user-read-currently-playing"
    STREAMING = "streaming"
    APP_REMOTE_CONTROL = "app-remote-control"
    USER_READ_EMAIL = "user-read-email"
    USER_READ_PRIVATE = "user-read-private"
    PLAYLIST_READ_COLLABORATIVE = "playlist-read-collaborative"
    PLAYLIST_READ_PRIVATE = "playlist-read-private"
    PLAYLIST_MODIFY_PUBLIC = "playlist-modify-public"
    PLAYLIST_MODIFY_PRIVATE = "playlist-modify-private"
    USER_LIBRARY_READ = "user-library-read"
    USER_LIBRARY_MODIFY = "user-library-modify"
    USER_TOP_READ = "user-top-read"
    USER_READ_PLAYBACK_POSITION = "user-read-playback-position"
    USER_READ_RECENTLY_PLAYED = "user-read-recently-played"
    USER_FOLLOW_READ = "user-follow-read"
    USER_FOLLOW_MODIFY = "user-follow-modify"

    @classmethod
    def parse(cls, value: str) -> set["Scope"]:
        """Parse a space separated scope string as returned by the token endpoint.

        Unknown scope names are ignored so newer grants do not break older clients.
        """
        known = {scope.value: scope for scope in cls}
        return {known[name] for name in value.split() if name in known}


class ItemKind(str, Enum):
    """Identifies which item model a page's contents decode to."""

    SIMPLE_TRACK = "simple_track"
    TRACK = "track"
    SIMPLE_ALBUM = "simple_album"
    SAVED_TRACK = "saved_track"
    SAVED_ALBUM = "saved_album"
    SAVED_SHOW = "saved_show"
    SAVED_EPISODE = "saved_episode"
    ARTIST = "artist"
    SIMPLE_PLAYLIST = "simple_playlist"
    PLAYLIST_TRACK = "playlist_track"
    CATEGORY = "category"
    PLAY_HISTORY = "play_history"


class PagingStyle(str, Enum):
    """Wire layout of a paginated collection."""

    OFFSET = "offset"
    CURSOR = "cursor"


class TraversalDirection(str, Enum):
    """Direction in which to fetch an adjacent page."""

    FORWARDS = "forwards"
    BACKWARDS = "backwards"


class LibraryType(str, Enum):
    """Object types that can be saved in a user's library.

    The value is the path segment used by the library endpoints and the
    URI type accepted for ids.
    """

    TRACK = "tracks"
    ALBUM = "albums"
    EPISODE = "episodes"
    SHOW = "shows"

    @property
    def uri_type(self) -> str:
        return self.value[:-1]


class TimeRange(str, Enum):
    """Time frame over which personalization affinities are computed."""

    LONG_TERM = "long_term"  # several years of data
    MEDIUM_TERM = "medium_term"  # roughly six months
    SHORT_TERM = "short_term"  # roughly four weeks
