"""Services (business logic) for dir-usage-cli."""

from . import scanner_service

__all__ = ["scanner_service"]
