"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache

from point_ledger.core.config import Settings, get_settings
from point_ledger.infrastructure.database import build_engine, build_session_factory, init_db
from point_ledger.modules.points import PointPolicy, PointService

logger = logging.getLogger(__name__)


def build_point_service(settings: Settings) -> PointService:
    policy = PointPolicy.from_settings(settings.points)
    if settings.storage.backend == "sqlalchemy":
        engine = build_engine(settings.database_url, echo=settings.database.echo or settings.debug)
        init_db(engine)
        return PointService.with_session_factory(build_session_factory(engine), policy)
    return PointService.in_memory(policy, latency_ms=settings.storage.latency_ms)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    point_service: PointService = field(init=False)

    def __post_init__(self) -> None:
        self.point_service = build_point_service(self.settings)
        logger.info("Point ledger initialised with %s storage", self.settings.storage.backend)


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer(settings=get_settings())


__all__ = ["ApplicationContainer", "build_point_service", "get_container"]
