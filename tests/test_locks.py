"""
test_locks.py - Per-user lock registry
"""

import threading
import time

import pytest

from point_ledger.modules.points import KeyLockManager
from tests.helpers import run_concurrently


def test_same_key_returns_same_lock():
    locks = KeyLockManager()
    assert locks.lock_for(1) is locks.lock_for(1)


def test_distinct_keys_get_distinct_locks():
    locks = KeyLockManager()
    assert locks.lock_for(1) is not locks.lock_for(2)
    assert sorted(locks.tracked_keys()) == [1, 2]
    assert len(locks) == 2


def test_concurrent_first_use_converges_on_one_lock():
    locks = KeyLockManager()
    results = run_concurrently([(locks.lock_for, (7,)) for _ in range(32)])
    assert len({id(lock) for lock in results}) == 1
    assert len(locks) == 1


def test_acquire_holds_lock_for_block():
    locks = KeyLockManager()
    with locks.acquire(1):
        assert locks.lock_for(1).locked()
    assert not locks.lock_for(1).locked()


def test_acquire_releases_on_error():
    locks = KeyLockManager()
    with pytest.raises(RuntimeError):
        with locks.acquire(1):
            raise RuntimeError("boom")
    assert not locks.lock_for(1).locked()


def test_acquire_releases_on_keyboard_interrupt():
    locks = KeyLockManager()
    with pytest.raises(KeyboardInterrupt):
        with locks.acquire(1):
            raise KeyboardInterrupt
    assert locks.lock_for(1).acquire(blocking=False)


def test_other_keys_not_blocked_while_one_is_held():
    locks = KeyLockManager()
    acquired = threading.Event()

    def _take_other_key():
        with locks.acquire(2):
            acquired.set()

    with locks.acquire(1):
        worker = threading.Thread(target=_take_other_key)
        worker.start()
        assert acquired.wait(timeout=2)
        worker.join()


def test_same_key_waits_for_holder():
    locks = KeyLockManager()
    order = []

    def _second():
        with locks.acquire(1):
            order.append("second")

    with locks.acquire(1):
        worker = threading.Thread(target=_second)
        worker.start()
        time.sleep(0.05)
        order.append("first")
    worker.join(timeout=2)
    assert order == ["first", "second"]
