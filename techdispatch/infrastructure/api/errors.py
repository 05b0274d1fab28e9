"""Map domain errors to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from techdispatch.domain.exceptions import (
    CorruptStoreError,
    InvalidArgumentError,
    InvalidInputError,
    NotFoundError,
    StorageIOError,
    TechDispatchError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[TechDispatchError], int] = {
    InvalidInputError: 400,
    InvalidArgumentError: 400,
    NotFoundError: 404,
    CorruptStoreError: 500,
    StorageIOError: 503,
}


def status_for(exc: TechDispatchError) -> int:
    for error_type, status in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status
    return 500


async def handle_domain_error(request: Request, exc: TechDispatchError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TechDispatchError, handle_domain_error)
