from fastapi import APIRouter

from point_ledger.interfaces.http.routers import points


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(points.router, prefix="/point", tags=["points"])
    return router


__all__ = [
    "create_api_router",
]
