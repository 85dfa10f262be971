# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the middleware components that wrap every request to our API,
# recording what happens and turning unexpected failures into tidy error replies.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components, providing centralized configuration
# for request logging and error handling middleware.
# 🔗 Dependencies:
# FastAPI middleware components, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.main.py, FastAPI application setup, middleware registration

"""
User Subscriptions API Middleware Package

Middleware Stack Order (last added is outermost):
    1. RequestLoggingMiddleware (outermost - binds X-Request-ID, logs timing)
    2. ErrorHandlingMiddleware (renders anything unhandled as a generic 500)
    3. Application Routes (innermost)

Usage:
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
"""

from typing import Any, Dict

# Middleware configuration constants
MIDDLEWARE_CONFIG = {
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/health",
        ],
        "sensitive_headers": [
            "authorization",
            "x-api-key",
            "cookie",
            "x-access-token"
        ],
        "slow_request_threshold": 2.0,
        "very_slow_request_threshold": 5.0,
    },
}

# Common HTTP headers used by middleware
COMMON_HEADERS = {
    "REQUEST_ID": "X-Request-ID",
    "RESPONSE_TIME": "X-Response-Time",
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific middleware

    Args:
        middleware_name: Name of the middleware

    Returns:
        Middleware configuration dictionary
    """
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing
    """
    exclude_paths = get_middleware_config(middleware_name).get("exclude_paths", [])
    return any(path == excluded or path.endswith(excluded) for excluded in exclude_paths)
