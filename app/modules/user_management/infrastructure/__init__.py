# 📄 File: app/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file sets up the infrastructure layer for user management, which handles how users
# and subscriptions are actually stored in the database.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer initialization; concrete repository implementations are exposed
# lazily for type checkers only.
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository wiring)

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
    from app.modules.user_management.infrastructure.database.subscription_repository_impl import SubscriptionRepositoryImpl

__all__ = [
    "UserRepositoryImpl",
    "SubscriptionRepositoryImpl",
]
