"""Database infrastructure helpers (engine, sessions)."""

from .base import Base
from .session import SessionScope, build_engine, build_session_factory, init_db

__all__ = ["Base", "SessionScope", "build_engine", "build_session_factory", "init_db"]
