"""Unit and path constants for dir-usage-cli."""

import pathlib

HOME = str(pathlib.Path.home())

BYTES_IN_KB = 1024
BYTES_IN_MB = 1024 * 1024

# unit -> divisor
UNITS = {
    "B": 1,
    "KB": BYTES_IN_KB,
    "MB": BYTES_IN_MB,
}

DEFAULT_DIR = "."
DEFAULT_UNIT = "MB"
