"""Exception handlers mapping domain errors onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from point_ledger.modules.points import PointRejectedError
from point_ledger.schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def point_rejected_handler(request: Request, exc: PointRejectedError) -> JSONResponse:
    body = ErrorResponse(code=exc.reason.value, message=str(exc))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(code="500", message="An error occurred.")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PointRejectedError, point_rejected_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


__all__ = ["register_exception_handlers"]
