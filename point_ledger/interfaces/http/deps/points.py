"""Point related dependency providers."""

from fastapi import Request

from point_ledger.core.container import ApplicationContainer
from point_ledger.modules.points import PointService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_point_service(request: Request) -> PointService:
    return get_container(request).point_service


__all__ = [
    "get_container",
    "get_point_service",
]
