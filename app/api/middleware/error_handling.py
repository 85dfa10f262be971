# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into short, consistent error messages
# that callers can understand, like translating technical problems into helpful responses.
# 🧪 Purpose (Technical Summary):
# Error translation layer: exception handlers for the domain exception hierarchy, request validation
# and HTTP errors, plus a last-resort middleware that renders unexpected failures as a generic 500.
# Every error body has the shape {"message": str | list[str], "status": int}.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware and handler registration), all API endpoints

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import UserSubscriptionsException, is_client_error
from app.shared.utils.logging import get_request_id

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."

REQUEST_SECTIONS = ("body", "path", "query", "header", "cookie")


def create_error_response(
    message: Union[str, List[str]],
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    extra: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """
    Create a standardized error response

    Args:
        message: Human-readable message, or one message per invalid field
        status_code: HTTP status code
        extra: Additional top-level keys (debug only)
        headers: Extra response headers

    Returns:
        JSON error response
    """
    content: Dict[str, Any] = {"message": message, "status": status_code}
    if extra:
        content.update(extra)

    response_headers = dict(headers or {})
    request_id = get_request_id()
    if request_id:
        response_headers.setdefault("X-Request-ID", request_id)

    return JSONResponse(status_code=status_code, content=content, headers=response_headers)


def format_validation_errors(errors) -> List[str]:
    """
    Turn pydantic error entries into one readable message per field.

    Custom "blank" errors already carry the full message; everything else is
    prefixed with the field path.
    """
    messages = []
    for error in errors:
        if error.get("type") == "blank":
            messages.append(error["msg"])
            continue

        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in REQUEST_SECTIONS:
            location = location[1:]
        field = ".".join(location) if location else "body"
        messages.append(f"Field {field}: {error.get('msg', 'invalid value')}")
    return messages


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def user_subscriptions_exception_handler(
    request: Request,
    exc: UserSubscriptionsException
) -> JSONResponse:
    """Handle custom User Subscriptions application exceptions."""
    log_context = {
        "method": request.method,
        "path": str(request.url.path),
        "status_code": exc.status_code,
        "error_code": exc.error_code,
        "details": exc.details,
    }

    if is_client_error(exc):
        # Client errors - log as info (not our fault)
        logger.info(f"Client error in {request.method} {request.url.path}: {exc.message}", extra=log_context)
    else:
        logger.error(
            f"Server error in {request.method} {request.url.path}: {exc.message}",
            extra=log_context,
            exc_info=exc,
        )
        body = exc.to_dict()
        return create_error_response(GENERIC_ERROR_MESSAGE, body["status"])

    body = exc.to_dict()
    return create_error_response(body["message"], body["status"])


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request body/path validation failures as 400 with per-field messages."""
    messages = format_validation_errors(exc.errors())
    logger.info(
        f"Request validation failed for {request.method} {request.url.path}",
        extra={"validation_errors": messages},
    )
    return create_error_response(messages, status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP errors raised by routing (unknown paths, wrong methods)."""
    return create_error_response(
        str(exc.detail),
        exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(UserSubscriptionsException, user_subscriptions_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


# =============================================================================
# LAST-RESORT MIDDLEWARE
# =============================================================================

class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the User Subscriptions API

    Catches every exception no handler claimed, logs it with full traceback
    and returns a generic 500 body. The exception text is added under an
    ``error`` key only in debug mode outside production.
    """

    def __init__(self, app: ASGIApp, settings: Optional[Settings] = None):
        super().__init__(app)
        self.settings = settings or get_settings()

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._handle_exception(request, exc)

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled error in {request.method} {request.url.path}",
            extra={
                "method": request.method,
                "path": str(request.url.path),
                "exception_type": type(exc).__name__,
            },
            exc_info=exc,
        )

        extra = None
        if self.settings.DEBUG and not self.settings.is_production:
            extra = {"error": f"{type(exc).__name__}: {exc}"}

        return create_error_response(
            GENERIC_ERROR_MESSAGE,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            extra=extra,
        )
