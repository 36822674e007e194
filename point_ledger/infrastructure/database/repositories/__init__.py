"""SQLAlchemy repository implementations."""

from .point_repository import SqlPointHistoryRepository, SqlUserPointRepository

__all__ = ["SqlPointHistoryRepository", "SqlUserPointRepository"]
