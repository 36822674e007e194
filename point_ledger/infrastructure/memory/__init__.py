"""In-memory storage used by default and in tests."""

from .tables import PointHistoryTable, UserPointTable

__all__ = ["PointHistoryTable", "UserPointTable"]
