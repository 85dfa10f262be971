# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending user requests
# to the user handlers and subscription requests to the subscription handlers.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines the module routers and the API info endpoint.
# Mounted under API_PREFIX by app.main.
# 🔗 Dependencies:
# FastAPI, app.modules.user_management.presentation.api.v1.*
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging
from typing import Any, Dict

from fastapi import APIRouter

from app.modules.user_management.presentation.api.v1.subscriptions import subscriptions_router
from app.modules.user_management.presentation.api.v1.users import users_router
from . import get_api_info

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# =========================================================================
# MODULE ROUTER INCLUDES - USER MANAGEMENT MODULE
# =========================================================================

api_v1_router.include_router(users_router)
api_v1_router.include_router(subscriptions_router)


# =========================================================================
# API V1 INFO ENDPOINT
# =========================================================================

@api_v1_router.get("/",
                  summary="API v1 Information",
                  description="Get API v1 version information and available endpoints",
                  tags=["API Info"])
async def api_v1_info() -> Dict[str, Any]:
    return {
        **get_api_info(),
        "endpoints": _get_available_endpoints(),
    }


def _get_available_endpoints() -> Dict[str, str]:
    return {
        route.name: route.path
        for route in api_v1_router.routes
        if getattr(route, "include_in_schema", False) and route.path != "/"
    }
