# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the contracts that say how users and subscriptions are saved and found
# 🧪 Purpose (Technical Summary):
# Package initialization for repository interfaces; concrete implementations live in the infrastructure layer
# 🔄 Connected Modules / Calls From:
# Domain services, infrastructure implementations

from .user_repository import UserRepository
from .subscription_repository import SubscriptionRepository

__all__ = [
    "UserRepository",
    "SubscriptionRepository",
]
