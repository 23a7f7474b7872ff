#!/usr/bin/env python3
"""
Error handlers for the web application.

Every error response has the shape {"success": false, "error", "type"},
so clients can tell a failed load apart from an empty match list.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.errors import (
    AccessDenied,
    ConflictError,
    InputError,
    MatchEngineError,
    MatchNotFound,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)


def _status_for(exc: MatchEngineError) -> int:
    if isinstance(exc, MatchNotFound):
        return 404
    if isinstance(exc, InputError):
        return 400
    if isinstance(exc, AccessDenied):
        return 403
    if isinstance(exc, ConflictError):
        return 409
    if isinstance(exc, StoreUnavailable):
        return 503
    return 500


def _error_response(status_code: int, error, error_type: str, **extra) -> JSONResponse:
    content = {
        "success": False,
        "error": error,
        "type": error_type
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def match_engine_exception_handler(
    request: Request,
    exc: MatchEngineError
) -> JSONResponse:
    """
    Handle match engine exceptions.

    Args:
        request: The FastAPI request.
        exc: The engine exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = _status_for(exc)
    if status_code >= 500:
        logger.error(f"Engine error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected {request.url.path}: {exc.__class__.__name__}: {exc}")

    extra = {}
    if isinstance(exc, StoreUnavailable):
        extra["retryable"] = True

    return _error_response(status_code, str(exc), exc.__class__.__name__, **extra)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Malformed path/query/body parameters are input errors."""
    messages = [
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return _error_response(400, "; ".join(messages), "InputError")


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")
    return _error_response(500, "Internal server error", "InternalError")
