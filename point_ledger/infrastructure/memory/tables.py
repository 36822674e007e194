"""In-memory tables backing point balances and history."""

from __future__ import annotations

import itertools
import random
import threading
import time
from collections import defaultdict
from datetime import datetime
from typing import DefaultDict, Dict, List

from point_ledger.modules.points.models import PointBalance, PointHistory, TransactionKind, utcnow


class _SimulatedLatency:
    """Sleeps a random ``[0, latency_ms]`` milliseconds before each access."""

    def __init__(self, latency_ms: int = 0) -> None:
        self.latency_ms = latency_ms

    def _throttle(self) -> None:
        if self.latency_ms > 0:
            time.sleep(random.randint(0, self.latency_ms) / 1000)


class UserPointTable(_SimulatedLatency):
    def __init__(self, latency_ms: int = 0) -> None:
        super().__init__(latency_ms)
        self._table: Dict[int, PointBalance] = {}
        self._lock = threading.Lock()

    def select_balance(self, user_id: int) -> PointBalance:
        self._throttle()
        with self._lock:
            balance = self._table.get(user_id)
        return balance if balance is not None else PointBalance.empty(user_id)

    def upsert_balance(self, user_id: int, amount: int) -> PointBalance:
        self._throttle()
        balance = PointBalance(user_id=user_id, amount=amount, updated_at=utcnow())
        with self._lock:
            self._table[user_id] = balance
        return balance


class PointHistoryTable(_SimulatedLatency):
    def __init__(self, latency_ms: int = 0) -> None:
        super().__init__(latency_ms)
        self._entries: DefaultDict[int, List[PointHistory]] = defaultdict(list)
        self._cursor = itertools.count(1)
        self._lock = threading.Lock()

    def append_history(
        self,
        user_id: int,
        amount: int,
        kind: TransactionKind,
        created_at: datetime,
    ) -> PointHistory:
        self._throttle()
        with self._lock:
            entry = PointHistory(
                id=next(self._cursor),
                user_id=user_id,
                amount=amount,
                kind=kind,
                created_at=created_at,
            )
            self._entries[user_id].append(entry)
        return entry

    def select_history(self, user_id: int) -> List[PointHistory]:
        self._throttle()
        with self._lock:
            return list(self._entries.get(user_id, ()))
