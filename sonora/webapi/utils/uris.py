"""Identifier normalisation for ids, URIs and open.spotify.com links."""

from __future__ import annotations

from urllib.parse import urlparse

from ..core.exceptions import ValidationError

_URI_PREFIX = "spotify:"
_OPEN_HOST = "open.spotify.com"


def extract_id(value: str, uri_type: str | None = None) -> str:
    """Return the bare id from an id, ``spotify:<type>:<id>`` URI or share link.

    Args:
        value: Id, URI or https://open.spotify.com link
        uri_type: Expected object type (e.g. "track"); checked when ``value``
            carries a type

    Raises:
        ValidationError: If the value is empty or its type does not match
    """
    value = value.strip()
    if not value:
        raise ValidationError("Identifier must be a non-empty string")

    found_type: str | None = None
    if value.startswith(_URI_PREFIX):
        parts = value.split(":")
        if len(parts) < 3 or not parts[-1]:
            raise ValidationError(f"Malformed URI: {value}")
        # spotify:user:<user>:playlist:<id> is still accepted
        found_type, ident = parts[-2], parts[-1]
    elif value.startswith("http"):
        parsed = urlparse(value)
        segments = [segment for segment in parsed.path.split("/") if segment]
        if parsed.netloc != _OPEN_HOST or len(segments) < 2:
            raise ValidationError(f"Not a share link: {value}")
        found_type, ident = segments[-2], segments[-1]
    else:
        ident = value

    if uri_type is not None and found_type is not None and found_type != uri_type:
        raise ValidationError(f"Expected a {uri_type} identifier, got {found_type}: {value}")
    return ident


def extract_ids(values: list[str] | tuple[str, ...], uri_type: str | None = None) -> list[str]:
    return [extract_id(value, uri_type) for value in values]
