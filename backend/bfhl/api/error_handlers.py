"""Error Handlers: global exception handlers, all answering with an Envelope.

Invariants:
    - BfhlError -> its http_status and public_message
    - RequestValidationError -> 400 "Invalid request data"
    - Exception (catch-all) -> 500 "Internal Server Error", never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BfhlError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bfhl.config import get_settings
from bfhl.core.errors import INTERNAL_SERVER_ERROR_MESSAGE, BfhlError, ErrorCategory
from bfhl.schemas.envelope import Envelope

logger = logging.getLogger(__name__)

INVALID_REQUEST_DATA_MESSAGE = "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bfhl_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _envelope_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=Envelope.failure(get_settings().official_email, error),
    )


def _register_bfhl_error_handler(app: FastAPI) -> None:
    """Register service error handler."""

    @app.exception_handler(BfhlError)
    async def bfhl_error_handler(request: Request, exc: BfhlError):
        log = logger.warning if exc.category is ErrorCategory.VALIDATION else logger.error
        log(
            f"BfhlError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return _envelope_response(exc.http_status, exc.public_message)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _envelope_response(
            status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_DATA_MESSAGE,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return _envelope_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR_MESSAGE,
        )
