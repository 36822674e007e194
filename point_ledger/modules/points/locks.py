"""Per-user mutual exclusion for point mutations."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

logger = logging.getLogger(__name__)


class KeyLockManager:
    """Hands out one lock per user id.

    Locks are created lazily and kept for the lifetime of the manager, so two
    callers asking for the same key always share the same lock instance.
    """

    def __init__(self) -> None:
        self._locks: Dict[int, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def lock_for(self, user_id: int) -> threading.Lock:
        lock = self._locks.get(user_id)
        if lock is not None:
            return lock
        with self._registry_lock:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
                logger.debug("Created lock for user %s", user_id)
            return lock

    @contextmanager
    def acquire(self, user_id: int) -> Iterator[None]:
        with self.lock_for(user_id):
            yield

    def tracked_keys(self) -> list[int]:
        with self._registry_lock:
            return list(self._locks)

    def __len__(self) -> int:
        return len(self._locks)


__all__ = ["KeyLockManager"]
