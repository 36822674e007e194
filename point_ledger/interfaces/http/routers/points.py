"""Point balance endpoints: balance lookup, history, charge and use."""
from __future__ import annotations

from fastapi import APIRouter, Body, Depends
from starlette.concurrency import run_in_threadpool

from point_ledger.interfaces.http.deps import get_point_service
from point_ledger.modules.points import PointService
from point_ledger.schemas import PointHistoryResponse, UserPointResponse

router = APIRouter()


@router.get("/{user_id}", response_model=UserPointResponse, summary="Get point balance")
async def get_point(
    user_id: int,
    service: PointService = Depends(get_point_service),
) -> UserPointResponse:
    balance = await run_in_threadpool(service.get_balance, user_id)
    return UserPointResponse.from_domain(balance)


@router.get(
    "/{user_id}/histories",
    response_model=list[PointHistoryResponse],
    summary="List recent point transactions",
)
async def get_histories(
    user_id: int,
    service: PointService = Depends(get_point_service),
) -> list[PointHistoryResponse]:
    entries = await run_in_threadpool(service.get_history, user_id)
    return [PointHistoryResponse.from_domain(entry) for entry in entries]


@router.patch("/{user_id}/charge", response_model=UserPointResponse, summary="Charge points")
async def charge_point(
    user_id: int,
    amount: int = Body(...),
    service: PointService = Depends(get_point_service),
) -> UserPointResponse:
    # Engine calls block on the per-user lock, so they run off the event loop.
    balance = await run_in_threadpool(service.charge, user_id, amount)
    return UserPointResponse.from_domain(balance)


@router.patch("/{user_id}/use", response_model=UserPointResponse, summary="Use points")
async def use_point(
    user_id: int,
    amount: int = Body(...),
    service: PointService = Depends(get_point_service),
) -> UserPointResponse:
    balance = await run_in_threadpool(service.use, user_id, amount)
    return UserPointResponse.from_domain(balance)
