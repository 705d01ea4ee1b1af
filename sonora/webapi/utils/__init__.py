"""Utility functions."""

from .uris import extract_id, extract_ids

__all__ = ["extract_id", "extract_ids"]
