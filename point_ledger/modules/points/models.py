"""Domain models for point balances and their transaction history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TransactionKind(str, Enum):
    CHARGE = "CHARGE"
    SPEND = "SPEND"


@dataclass(frozen=True, slots=True)
class PointBalance:
    user_id: int
    amount: int
    updated_at: datetime

    @classmethod
    def empty(cls, user_id: int) -> "PointBalance":
        return cls(user_id=user_id, amount=0, updated_at=utcnow())


@dataclass(frozen=True, slots=True)
class PointHistory:
    id: int
    user_id: int
    amount: int
    kind: TransactionKind
    created_at: datetime
