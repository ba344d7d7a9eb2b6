"""Map exceptions to the API's ``{success: false, message}`` envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from coffeeshop.domain.exceptions import (
    AuthorizationError,
    DomainException,
    EntityNotFoundError,
    NotificationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; ConflictError is a ValidationError and shares its 400.
_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (EntityNotFoundError, 404),
    (AuthorizationError, 401),
    (NotificationError, 500),
]


def status_code_for(exc: DomainException) -> int:
    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return failure(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
        return failure(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        # A path known only under another method is still an unknown endpoint.
        if exc.status_code in (404, 405):
            return failure(404, "Endpoint not found")
        return failure(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return failure(500, "Something went wrong!")
