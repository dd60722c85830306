"""Exceptions raised by dhbloom."""
from __future__ import annotations


class BloomConfigError(ValueError):
    """Raised when a filter is constructed with unusable sizing parameters."""
