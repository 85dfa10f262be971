# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core business rules for users and subscriptions
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting entities, repository interfaces and domain services
# 🔗 Dependencies:
# Domain models, services, repositories from subpackages
# 🔄 Connected Modules / Calls From:
# Infrastructure layer, Presentation layer

"""
User Management Domain Layer

Domain Models:
- User: unique username plus version counter
- Subscription: named subscription owned by one user

Domain Services:
- UserService: user lookup, creation, rename and cascade deletion
- SubscriptionService: subscription creation, listing, ranking and deletion

Repository Interfaces:
- UserRepository
- SubscriptionRepository
"""

from .models.user import User
from .models.subscription import Subscription

from .repositories.user_repository import UserRepository
from .repositories.subscription_repository import SubscriptionRepository

from .services.user_service import UserService
from .services.subscription_service import SubscriptionService

__all__ = [
    "User",
    "Subscription",
    "UserRepository",
    "SubscriptionRepository",
    "UserService",
    "SubscriptionService",
]
