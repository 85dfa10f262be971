# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of our API, so a later version can be added without
# breaking existing callers.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1, providing version metadata shared by the
# router aggregation and the info endpoint.
# 🔗 Dependencies:
# app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
User Subscriptions API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints
"""

from typing import Any, Dict

from app.shared.config.settings import get_settings

# API v1 metadata
__api_version__ = "v1"
__status__ = "stable"


def get_api_info() -> Dict[str, Any]:
    """
    Get API v1 information
    """
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": __api_version__,
        "status": __status__,
        "description": settings.APP_DESCRIPTION,
        "base_path": settings.API_PREFIX,
    }
