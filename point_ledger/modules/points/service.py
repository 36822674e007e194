"""Point domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from .exceptions import rejection_error
from .locks import KeyLockManager
from .models import PointBalance, PointHistory, TransactionKind
from .policy import DEFAULT_POLICY, Outcome, PointPolicy, Rejection, compute_charge, compute_spend
from .repository import BalanceRepository, HistoryRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PointService:
    balances: BalanceRepository
    histories: HistoryRepository
    locks: KeyLockManager = field(default_factory=KeyLockManager)
    policy: PointPolicy = DEFAULT_POLICY

    @classmethod
    def in_memory(cls, policy: PointPolicy = DEFAULT_POLICY, latency_ms: int = 0) -> "PointService":
        # Stores import the domain models, so they are resolved at call time.
        from point_ledger.infrastructure.memory import PointHistoryTable, UserPointTable

        return cls(
            UserPointTable(latency_ms=latency_ms),
            PointHistoryTable(latency_ms=latency_ms),
            policy=policy,
        )

    @classmethod
    def with_session_factory(
        cls, session_factory: sessionmaker[Session], policy: PointPolicy = DEFAULT_POLICY
    ) -> "PointService":
        from point_ledger.infrastructure.database.repositories import (
            SqlPointHistoryRepository,
            SqlUserPointRepository,
        )
        from point_ledger.infrastructure.database.session import SessionScope

        scope = SessionScope(session_factory)
        return cls(
            SqlUserPointRepository(scope),
            SqlPointHistoryRepository(scope),
            policy=policy,
        )

    def charge(self, user_id: int, amount: int) -> PointBalance:
        return self._mutate(user_id, amount, TransactionKind.CHARGE, compute_charge)

    def spend(self, user_id: int, amount: int) -> PointBalance:
        return self._mutate(user_id, amount, TransactionKind.SPEND, compute_spend)

    use = spend

    def get_balance(self, user_id: int) -> PointBalance:
        return self.balances.select_balance(user_id)

    def get_history(self, user_id: int) -> list[PointHistory]:
        """Return the most recent entries for ``user_id``, oldest first."""
        entries = self.histories.select_history(user_id)
        return list(entries[-self.policy.history_limit:])

    def _mutate(
        self,
        user_id: int,
        amount: int,
        kind: TransactionKind,
        compute: Callable[[int, int, PointPolicy], Outcome],
    ) -> PointBalance:
        with self.locks.acquire(user_id):
            current = self.balances.select_balance(user_id)
            outcome = compute(current.amount, amount, self.policy)
            if isinstance(outcome, Rejection):
                logger.warning(
                    "%s rejected for user %s: %s (amount=%s, balance=%s)",
                    kind.value, user_id, outcome.reason.value, amount, current.amount,
                )
                raise rejection_error(outcome)

            updated = self.balances.upsert_balance(user_id, outcome)
            try:
                self.histories.append_history(user_id, amount, kind, updated.updated_at)
            except Exception:
                # Keep balance and history in step when the history store fails.
                self.balances.upsert_balance(user_id, current.amount)
                raise
            logger.info(
                "%s %s points for user %s: %s -> %s",
                kind.value, amount, user_id, current.amount, updated.amount,
            )
            return updated
