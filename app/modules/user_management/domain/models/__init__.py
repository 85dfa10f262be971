# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the descriptions of what a user and a subscription are
# 🧪 Purpose (Technical Summary):
# Package initialization for the pydantic domain entities
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, infrastructure layer

from .user import User, is_blank
from .subscription import Subscription

__all__ = [
    "User",
    "Subscription",
    "is_blank",
]
