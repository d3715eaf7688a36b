#!/usr/bin/env python3
"""
Error handlers for the web application.

Domain exceptions live in core.exceptions; this module maps them, request
validation failures and anything unexpected to JSON responses.
"""

import logging
from typing import Any, Dict, List

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import ServiceException

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later"


def _error_body(message: str, error_type: str, **extra: Any) -> Dict[str, Any]:
    body = {
        "success": False,
        "message": message,
        "type": error_type
    }
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def _field_path(loc: tuple) -> str:
    """Render a validation location without its source prefix (body/query/form)."""
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def describe_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Summarize pydantic errors into a single message.

    Returns:
        Dict with ``message`` and ``missing_fields``.
    """
    missing = []
    problems = []
    for error in errors:
        path = _field_path(tuple(error.get("loc", ())))
        if error.get("type") == "missing":
            missing.append(path)
            continue
        msg = str(error.get("msg", "invalid value"))
        if msg.startswith("Value error, "):
            problems.append(msg[len("Value error, "):])
        else:
            problems.append(f"{path}: {msg}")

    if missing:
        message = f"Missing required fields: {', '.join(missing)}"
        if problems:
            message = f"{message}; {'; '.join(problems)}"
    else:
        message = "; ".join(problems) or "Invalid request"

    return {"message": message, "missing_fields": missing}


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}")
    else:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.__class__.__name__}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(
            exc.message,
            exc.__class__.__name__,
            detail=exc.detail,
            missing_fields=getattr(exc, "missing_fields", None) or None
        )
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report input-shape failures as 400 with the offending fields."""
    summary = describe_validation_errors(exc.errors())
    logger.info(f"Validation failed for {request.method} {request.url.path}: {summary['message']}")

    return JSONResponse(
        status_code=400,
        content=_error_body(
            summary["message"],
            "ValidationException",
            missing_fields=summary["missing_fields"] or None
        )
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), "HTTPException"),
        headers=getattr(exc, "headers", None)
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Reject a request over the per-client ceiling (called by SlowAPIMiddleware)."""
    logger.warning(f"Rate limit exceeded for {request.client.host if request.client else 'unknown'}: {exc.detail}")
    return JSONResponse(
        status_code=429,
        content=_error_body(RATE_LIMIT_MESSAGE, "RateLimitExceeded")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )

