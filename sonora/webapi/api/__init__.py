"""High-level API facade."""

from .web_api import WebAPI

__all__ = ["WebAPI"]
