# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the data validation schemas for the user and subscription endpoints, making sure
# incoming requests and outgoing responses have the right shape.
#
# 🧪 Purpose (Technical Summary):
# API schemas package re-exporting the pydantic request/response models.
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1 (API endpoints use schemas)

from app.modules.user_management.presentation.api.schemas.subscription_schemas import (
    SubscriptionCreateRequest,
    SubscriptionResponse,
)
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "SubscriptionCreateRequest",
    "SubscriptionResponse",
]
