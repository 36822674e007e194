"""SQLAlchemy implementation for point balances and history"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select

from point_ledger.infrastructure.database.models import PointHistoryRecord, UserPointRecord
from point_ledger.infrastructure.database.session import SessionScope
from point_ledger.modules.points.models import PointBalance, PointHistory, TransactionKind, utcnow


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlUserPointRepository:
    def __init__(self, scope: SessionScope) -> None:
        self.scope = scope

    def select_balance(self, user_id: int) -> PointBalance:
        with self.scope() as session:
            record = session.get(UserPointRecord, user_id)
            if record is None:
                return PointBalance.empty(user_id)
            return self._to_balance(record)

    def upsert_balance(self, user_id: int, amount: int) -> PointBalance:
        with self.scope() as session:
            record = session.merge(UserPointRecord(user_id=user_id, point=amount, updated_at=utcnow()))
            session.flush()
            return self._to_balance(record)

    @staticmethod
    def _to_balance(record: UserPointRecord) -> PointBalance:
        return PointBalance(
            user_id=record.user_id,
            amount=record.point,
            updated_at=_as_utc(record.updated_at),
        )


class SqlPointHistoryRepository:
    def __init__(self, scope: SessionScope) -> None:
        self.scope = scope

    def append_history(
        self,
        user_id: int,
        amount: int,
        kind: TransactionKind,
        created_at: datetime,
    ) -> PointHistory:
        with self.scope() as session:
            record = PointHistoryRecord(
                user_id=user_id,
                amount=amount,
                type=kind.value,
                created_at=created_at,
            )
            session.add(record)
            session.flush()
            return self._to_history(record)

    def select_history(self, user_id: int) -> list[PointHistory]:
        stmt = (
            select(PointHistoryRecord)
            .where(PointHistoryRecord.user_id == user_id)
            .order_by(PointHistoryRecord.id)
        )
        with self.scope() as session:
            return [self._to_history(record) for record in session.scalars(stmt)]

    @staticmethod
    def _to_history(record: PointHistoryRecord) -> PointHistory:
        return PointHistory(
            id=record.id,
            user_id=record.user_id,
            amount=record.amount,
            kind=TransactionKind(record.type),
            created_at=_as_utc(record.created_at),
        )
