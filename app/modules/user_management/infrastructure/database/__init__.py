# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes the database pieces for user management: the table definitions and
# the code that reads and writes them.
#
# 🧪 Purpose (Technical Summary):
# Database layer for user management: SQLAlchemy models with version counters and the
# repository implementations built on them.
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies
# - migrations/env.py (imports models for schema generation)

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.modules.user_management.infrastructure.database.models import (
        SubscriptionModel,
        UserModel,
    )
    from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
    from app.modules.user_management.infrastructure.database.subscription_repository_impl import SubscriptionRepositoryImpl


__all__ = [
    "UserModel",
    "SubscriptionModel",
    "UserRepositoryImpl",
    "SubscriptionRepositoryImpl",
]
