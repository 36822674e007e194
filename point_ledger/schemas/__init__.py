"""Pydantic schemas used across the project."""
from datetime import datetime

from pydantic import BaseModel

from point_ledger.modules.points import PointBalance, PointHistory, TransactionKind


class UserPointResponse(BaseModel):
    id: int
    point: int
    updated_at: datetime

    @classmethod
    def from_domain(cls, balance: PointBalance) -> "UserPointResponse":
        return cls(id=balance.user_id, point=balance.amount, updated_at=balance.updated_at)


class PointHistoryResponse(BaseModel):
    id: int
    user_id: int
    amount: int
    type: TransactionKind
    created_at: datetime

    @classmethod
    def from_domain(cls, entry: PointHistory) -> "PointHistoryResponse":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            amount=entry.amount,
            type=entry.kind,
            created_at=entry.created_at,
        )


class ErrorResponse(BaseModel):
    code: str
    message: str
