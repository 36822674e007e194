"""
conftest.py - Shared pytest fixtures for point ledger tests

Provides:
- Point services over the in-memory tables and over SQLite
- A slowed-down in-memory service that widens race windows
- A FastAPI test client bound to a fresh container
"""

import pytest
from fastapi.testclient import TestClient

from point_ledger.core.config import Settings
from point_ledger.infrastructure.database import build_engine, build_session_factory, init_db
from point_ledger.main import create_app
from point_ledger.modules.points import PointService


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def make_sql_service() -> PointService:
    engine = build_engine("sqlite://")
    init_db(engine)
    return PointService.with_session_factory(build_session_factory(engine))


# =============================================================================
# SERVICES
# =============================================================================

@pytest.fixture
def service() -> PointService:
    return PointService.in_memory()


@pytest.fixture
def slow_service() -> PointService:
    """In-memory service whose tables sleep up to 5ms per access."""
    return PointService.in_memory(latency_ms=5)


@pytest.fixture
def sql_service() -> PointService:
    return make_sql_service()


@pytest.fixture(params=["memory", "sqlalchemy"])
def any_service(request) -> PointService:
    if request.param == "memory":
        return PointService.in_memory(latency_ms=2)
    return make_sql_service()


# =============================================================================
# HTTP
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="test")


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
