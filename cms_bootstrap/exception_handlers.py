"""
Error envelopes for the snapshot API

Every failure is rendered as:
{
    "error": {
        "status_code": 503,
        "error_code": "SNAPSHOT_STORAGE_UNAVAILABLE",
        "message": "Snapshot storage is unavailable",
        "type": "Service Unavailable",
        "details": {"operation": "fetch_plugins"},
        "path": "/api/v1/snapshot/rebuild"
    }
}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cms_bootstrap.exceptions import CMSError, ErrorCode

logger = logging.getLogger(__name__)

# Statuses this service emits: admin guard, missing snapshot, persistence, storage
ERROR_TYPES: dict[int, str] = {
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}

HTTP_ERROR_CODES: dict[int, ErrorCode] = {
    status.HTTP_403_FORBIDDEN: ErrorCode.AUTH_PERMISSION_DENIED,
    status.HTTP_404_NOT_FOUND: ErrorCode.RESOURCE_NOT_FOUND,
    status.HTTP_500_INTERNAL_SERVER_ERROR: ErrorCode.INTERNAL_ERROR,
    status.HTTP_503_SERVICE_UNAVAILABLE: ErrorCode.SERVICE_UNAVAILABLE,
}


def get_error_type(status_code: int) -> str:
    return ERROR_TYPES.get(status_code, "Error")


def get_http_error_code(status_code: int) -> ErrorCode:
    return HTTP_ERROR_CODES.get(status_code, ErrorCode.UNKNOWN_ERROR)


def create_error_response(
    status_code: int,
    message: str,
    error_code: ErrorCode,
    path: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build the ``{"error": {...}}`` envelope; ``details`` is omitted when empty."""
    body: dict[str, Any] = {
        "status_code": status_code,
        "error_code": error_code.value,
        "message": message,
        "type": get_error_type(status_code),
        "path": path,
    }
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def cms_exception_handler(request: Request, exc: CMSError) -> JSONResponse:
    logger.error(
        "%s: %s",
        type(exc).__name__,
        exc.message,
        extra={"status_code": exc.status_code, "error_code": exc.error_code.value, "path": request.url.path},
    )
    return create_error_response(exc.status_code, exc.message, exc.error_code, request.url.path, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(
        "HTTP %d: %s",
        exc.status_code,
        exc.detail,
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return create_error_response(
        exc.status_code, str(exc.detail), get_http_error_code(exc.status_code), request.url.path
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback; the response never carries internal details."""
    logger.error(
        "Unhandled exception: %s",
        exc,
        exc_info=True,
        extra={"path": request.url.path, "method": request.method},
    )
    return create_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
        ErrorCode.INTERNAL_ERROR,
        request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CMSError, cms_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
