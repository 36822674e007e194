"""Feature modules."""

from . import points

__all__ = ["points"]
