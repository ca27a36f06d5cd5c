"""Core constants and config for dir-usage-cli."""

from .constants import (
    HOME,
    BYTES_IN_KB,
    BYTES_IN_MB,
    UNITS,
    DEFAULT_DIR,
    DEFAULT_UNIT,
)
from . import config

__all__ = [
    "HOME",
    "BYTES_IN_KB",
    "BYTES_IN_MB",
    "UNITS",
    "DEFAULT_DIR",
    "DEFAULT_UNIT",
    "config",
]
