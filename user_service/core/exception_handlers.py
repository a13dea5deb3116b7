"""Global exception handlers for consistent error responses.

This module registers exception handlers that convert all exceptions
to a unified JSON response format.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_service.core.exceptions import AppException
from user_service.models.error import ErrorResponse, ValidationErrorResponse

logger = logging.getLogger("user_service.exception")


def _error_response(
    request: Request, status_code: int, error_type: str, message: str
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code,
        type=error_type,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc if part not in ("body", "query", "path"))


def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle all AppException subclasses."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": exc.status_code,
        "error_type": exc.error_type,
    }
    if exc.status_code >= 500:
        logger.error("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    else:
        logger.info("AppException: %s - %s", exc.error_type, exc.message, extra=extra)
    return _error_response(request, exc.status_code, exc.error_type, exc.message)


def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors (unknown path, method not allowed)."""
    return _error_response(request, exc.status_code, "http_error", str(exc.detail))


def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Map rejected request input (bad enum, bad id, malformed body) to 400."""
    errors: dict[str, str] = {}
    messages = []
    for error in exc.errors():
        field = _field_name(tuple(error["loc"]))
        errors[field or "request"] = error["msg"]
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    logger.info(
        "Request validation failed: %s",
        "; ".join(messages),
        extra={"method": request.method, "path": request.url.path, "status_code": 400},
    )
    body = ValidationErrorResponse(
        status=400,
        type="validation_error",
        message="; ".join(messages),
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error(
        "Unhandled exception: %s %s - %s",
        request.method,
        request.url.path,
        exc,
        extra={"method": request.method, "path": request.url.path, "status_code": 500},
        exc_info=True,
    )
    return _error_response(
        request, 500, "internal_error", "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
