from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from imgdrop_core.errors import BadRequestError, ImgDropError, StorageError

from imgdrop_daemon.http.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(BadRequestError)
    async def bad_request_handler(request: Request, exc: BadRequestError) -> JSONResponse:
        logger.info("Rejected upload on %s: %s", request.url.path, exc.message, extra={"path": request.url.path})
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage failure on %s",
            request.url.path,
            extra={"path": request.url.path, "key": exc.key},
            exc_info=exc,
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(ImgDropError)
    async def domain_error_handler(request: Request, exc: ImgDropError) -> JSONResponse:
        logger.error("Unhandled domain error on %s", request.url.path, extra={"path": request.url.path}, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request")
