# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a diary of every request made to the service, recording what was asked for,
# how long it took to respond, and stamping each reply with a tracking number.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns or propagates X-Request-ID, binds it to the logging
# context for the duration of the request, and logs method/path/status/duration with
# sensitive header filtering and slow request classification.
# 🔗 Dependencies:
# FastAPI, starlette, logging, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context
from . import COMMON_HEADERS, get_middleware_config, should_exclude_path

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring

    Features:
    - Request correlation through X-Request-ID
    - Request/response timing
    - Security-aware header filtering
    - Slow request classification
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        config = get_middleware_config("logging")

        # Sensitive headers that should not be logged
        self.sensitive_headers = set(config.get("sensitive_headers", []))

        # Performance thresholds for warnings
        self.slow_request_threshold = config.get("slow_request_threshold", 2.0)
        self.very_slow_request_threshold = config.get("very_slow_request_threshold", 5.0)

        self.request_id_header = COMMON_HEADERS["REQUEST_ID"]

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process and log HTTP requests/responses

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = self._get_or_create_request_id(request)

        with log_context(request_id):
            start_time = time.perf_counter()
            log_requests = not should_exclude_path("logging", request.url.path)

            if log_requests:
                logger.debug(
                    f"{request.method} {request.url.path} started",
                    extra={
                        "event_type": "http_request",
                        "method": request.method,
                        "path": request.url.path,
                        "headers": self._filter_sensitive_headers(dict(request.headers)),
                        "client": request.client.host if request.client else "unknown",
                    },
                )

            response = await call_next(request)
            processing_time = time.perf_counter() - start_time

            response.headers[self.request_id_header] = request_id
            response.headers[COMMON_HEADERS["RESPONSE_TIME"]] = f"{processing_time:.3f}s"

            if log_requests:
                self._log_response(request, response, processing_time)

            return response

    def _get_or_create_request_id(self, request: Request) -> str:
        """Reuse the caller's X-Request-ID or generate a new one."""
        request_id = request.headers.get(self.request_id_header.lower())
        if not request_id:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, response: Response, processing_time: float) -> None:
        log_data: Dict[str, Any] = {
            "event_type": "http_response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "processing_time_ms": round(processing_time * 1000, 2),
        }

        # Add performance classification
        if processing_time > self.very_slow_request_threshold:
            log_data["performance"] = "very_slow"
        elif processing_time > self.slow_request_threshold:
            log_data["performance"] = "slow"
        else:
            log_data["performance"] = "normal"

        message = (
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({log_data['processing_time_ms']}ms)"
        )

        if log_data["performance"] != "normal":
            logger.warning(f"Slow request: {message}", extra=log_data)
        elif response.status_code >= 500:
            logger.error(message, extra=log_data)
        elif response.status_code >= 400:
            logger.warning(message, extra=log_data)
        else:
            logger.info(message, extra=log_data)

    def _filter_sensitive_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """
        Filter out sensitive headers from logging
        """
        filtered = {}
        for key, value in headers.items():
            key_lower = key.lower()
            if key_lower in self.sensitive_headers:
                filtered[key] = "[REDACTED]"
            elif "password" in key_lower or "secret" in key_lower:
                filtered[key] = "[REDACTED]"
            else:
                filtered[key] = value

        return filtered
