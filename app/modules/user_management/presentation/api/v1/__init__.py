# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of the user and subscription endpoints.
#
# 🧪 Purpose (Technical Summary):
# API version 1 initialization re-exporting the user and subscription routers.
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

from app.modules.user_management.presentation.api.v1.subscriptions import subscriptions_router
from app.modules.user_management.presentation.api.v1.users import users_router

__all__ = [
    "users_router",
    "subscriptions_router",
]
