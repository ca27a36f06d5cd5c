"""Utilities for dir-usage-cli."""

from . import console
from . import disk

__all__ = ["console", "disk"]
