"""dir-usage-cli: per-subdirectory disk usage, like a simplified `du -d1`."""

__version__ = "0.1.0"

from . import utils
from . import services
from . import core
from .core import config

__all__ = ["config", "core", "utils", "services", "__version__"]
