"""
Centralized error handlers for FastAPI.

Maps records domain errors to HTTP responses.
No stack traces, paths or OS error text are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from userfiles.domain.records.errors import (
    RecordDomainError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle missing or malformed client input."""
        logger.info("Rejected request: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(StorageError)
    async def handle_storage(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        """Handle filesystem failures with a generic client message."""
        logger.error(
            "Storage error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _error_response(HTTP_500, exc.public_message)

    @app.exception_handler(RecordDomainError)
    async def handle_records_domain(
        _request: Request, exc: RecordDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled records domain errors."""
        logger.error("Unhandled records domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
