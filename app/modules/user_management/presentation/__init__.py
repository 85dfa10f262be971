# 📄 File: app/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the presentation layer for user management: the web endpoints callers use
# to manage users and their subscriptions.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer initialization providing FastAPI routers, pydantic schemas and the
# dependency wiring from request session to domain services.
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (includes the routers)

"""
User Management Presentation Layer

API Structure (under API_PREFIX, default /user-subscriptions/v1):
- /users: user account endpoints
- /users/{user_id}/subscriptions: subscription endpoints
- /subscriptions/top: popularity ranking
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.presentation.api.v1.users import users_router
    from app.modules.user_management.presentation.api.v1.subscriptions import subscriptions_router

__all__ = [
    "users_router",
    "subscriptions_router",
]
