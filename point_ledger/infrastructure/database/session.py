"""SQLAlchemy engine and session management."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from point_ledger.infrastructure.database.base import Base


def build_engine(url: str, echo: bool = False) -> Engine:
    engine_kwargs: dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url in {"sqlite://", "sqlite:///:memory:"}:
            # A private in-memory database lives only as long as its connection.
            engine_kwargs["poolclass"] = StaticPool
    return create_engine(url, **engine_kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create database tables."""
    from point_ledger.infrastructure.database import models  # noqa: F401

    Base.metadata.create_all(engine)


class SessionScope:
    """Runs one session per store call and serializes the calls.

    Record reads and writes are atomic; nothing is held across a mutation.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self._lock = threading.Lock()

    @contextmanager
    def __call__(self) -> Iterator[Session]:
        with self._lock, self._session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
