"""Repository protocols for point balances and history."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .models import PointBalance, PointHistory, TransactionKind


class BalanceRepository(Protocol):
    def select_balance(self, user_id: int) -> PointBalance:
        ...

    def upsert_balance(self, user_id: int, amount: int) -> PointBalance:
        ...


class HistoryRepository(Protocol):
    def append_history(
        self,
        user_id: int,
        amount: int,
        kind: TransactionKind,
        created_at: datetime,
    ) -> PointHistory:
        ...

    def select_history(self, user_id: int) -> Sequence[PointHistory]:
        ...
