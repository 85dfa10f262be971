# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the services that apply the business rules for users and subscriptions
# 🧪 Purpose (Technical Summary):
# Package initialization for domain services
# 🔄 Connected Modules / Calls From:
# Presentation dependencies, API endpoints

from .user_service import UserService
from .subscription_service import SubscriptionService

__all__ = [
    "UserService",
    "SubscriptionService",
]
