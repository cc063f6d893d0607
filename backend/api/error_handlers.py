"""
Exception handlers.

Every failure leaves the API as ``{"success": false, "error", "message"}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    MultiProfileError,
    StorageError,
    UnhandledError,
    ValidationError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)


def create_json_error_response(
    status_code: int,
    code: str,
    message: str,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build the standard error body."""
    body = ErrorResponse(error=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def app_error_handler(request: Request, exc: MultiProfileError) -> JSONResponse:
    """Handle MultiProfileError subclasses using their status code."""
    if isinstance(exc, StorageError):
        logger.error(
            "Storage failure in %s %s (operation=%s)",
            request.method,
            request.url.path,
            exc.operation,
        )
    return create_json_error_response(exc.status_code, exc.code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors (400), not 422."""
    error = ValidationError("Invalid request body")
    return create_json_error_response(error.status_code, error.code, error.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Reshape framework HTTP errors (404, 405, ...) into the standard body."""
    return create_json_error_response(
        exc.status_code, "HTTP_ERROR", str(exc.detail), headers=getattr(exc, "headers", None)
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors (500)."""
    logger.exception("Unhandled error in %s %s: %s", request.method, request.url.path, exc)
    error = UnhandledError()
    return create_json_error_response(error.status_code, error.code, error.message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MultiProfileError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
