"""REST runtime abstractions."""

from .http_client import HTTPClient

__all__ = [
    "HTTPClient",
]
