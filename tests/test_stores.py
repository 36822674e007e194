"""
test_stores.py - In-memory tables and SQLAlchemy repositories

Both backends honour the same contract, so every test runs against each.
"""

from datetime import datetime, timezone

import pytest

from point_ledger.infrastructure.database import SessionScope, build_engine, build_session_factory, init_db
from point_ledger.infrastructure.database.models import UserPointRecord
from point_ledger.infrastructure.database.repositories import (
    SqlPointHistoryRepository,
    SqlUserPointRepository,
)
from point_ledger.infrastructure.memory import PointHistoryTable, UserPointTable
from point_ledger.modules.points import TransactionKind


@pytest.fixture(params=["memory", "sqlalchemy"])
def stores(request):
    if request.param == "memory":
        return UserPointTable(), PointHistoryTable()
    engine = build_engine("sqlite://")
    init_db(engine)
    scope = SessionScope(build_session_factory(engine))
    return SqlUserPointRepository(scope), SqlPointHistoryRepository(scope)


def test_select_missing_balance_returns_zero(stores):
    balances, _ = stores
    balance = balances.select_balance(1)
    assert balance.amount == 0
    assert balance.updated_at.tzinfo is not None


def test_upsert_is_last_write_wins(stores):
    balances, _ = stores
    balances.upsert_balance(1, 5_000)
    written = balances.upsert_balance(1, 7_000)
    assert written.amount == 7_000
    assert balances.select_balance(1) == written


def test_upsert_timestamps_are_utc(stores):
    balances, _ = stores
    written = balances.upsert_balance(1, 5_000)
    assert written.updated_at.tzinfo is not None
    assert balances.select_balance(1).updated_at.utcoffset().total_seconds() == 0


def test_history_is_insertion_ordered_per_user(stores):
    _, histories = stores
    now = datetime.now(timezone.utc)
    first = histories.append_history(1, 5_000, TransactionKind.CHARGE, now)
    histories.append_history(2, 5_000, TransactionKind.CHARGE, now)
    third = histories.append_history(1, 500, TransactionKind.SPEND, now)

    entries = histories.select_history(1)

    assert entries == [first, third]
    assert first.id < third.id
    assert third.kind is TransactionKind.SPEND
    assert histories.select_history(3) == []


def test_select_history_returns_a_copy(stores):
    _, histories = stores
    histories.append_history(1, 5_000, TransactionKind.CHARGE, datetime.now(timezone.utc))
    entries = histories.select_history(1)
    entries.clear()
    assert len(histories.select_history(1)) == 1


def test_simulated_latency_still_returns_records():
    balances = UserPointTable(latency_ms=3)
    balances.upsert_balance(1, 5_000)
    assert balances.select_balance(1).amount == 5_000


def test_scope_rolls_back_on_error():
    engine = build_engine("sqlite://")
    init_db(engine)
    scope = SessionScope(build_session_factory(engine))
    balances = SqlUserPointRepository(scope)
    balances.upsert_balance(1, 5_000)

    with pytest.raises(RuntimeError):
        with scope() as session:
            session.get(UserPointRecord, 1).point = 0
            session.flush()
            raise RuntimeError("abort")

    assert balances.select_balance(1).amount == 5_000
