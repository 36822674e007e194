"""SQLAlchemy ORM models."""
from sqlalchemy import Column, DateTime, Integer, String

from .base import Base


class UserPointRecord(Base):
    __tablename__ = "user_points"

    user_id = Column(Integer, primary_key=True, autoincrement=False)
    point = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class PointHistoryRecord(Base):
    __tablename__ = "point_histories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    type = Column(String(10), nullable=False)  # CHARGE, SPEND
    created_at = Column(DateTime(timezone=True), nullable=False)
