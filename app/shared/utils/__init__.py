# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the helper tools other parts of the app use, currently the logging setup.

# 🧪 Purpose (Technical Summary):
# Utilities package re-exporting the structured logging entry points.

# 🔄 Connected Modules / Calls From:
# Used by: app.main, RequestLoggingMiddleware

from .logging import get_request_id, log_context, setup_logging

__all__ = [
    'get_request_id',
    'log_context',
    'setup_logging',
]
