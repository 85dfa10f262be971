# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# This file hands each request the tools it needs: a database conversation, the storage helpers
# built on top of it, and the user and subscription services that hold the business rules.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies wiring repositories and domain services onto the
# per-request AsyncSession, so all work done by one request shares one transaction.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, app.shared.infrastructure.database.session,
# app.modules.user_management.domain.*, app.modules.user_management.infrastructure.database.*
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.*

"""
User Management Module Dependencies

    get_db_session -> UserRepositoryImpl / SubscriptionRepositoryImpl
                   -> UserService -> SubscriptionService

FastAPI caches dependencies per request, so every dependency below receives
the same session object. The session is function-scoped: its commit runs when
the route returns and before the response is sent, so a failed commit is
reported to the caller instead of after a success status went out.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.repositories.subscription_repository import SubscriptionRepository
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.domain.services.subscription_service import SubscriptionService
from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.infrastructure.database.subscription_repository_impl import (
    SubscriptionRepositoryImpl,
)
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.config.settings import Settings, get_settings
from app.shared.infrastructure.database.session import get_db_session


# =========================================================================
# REPOSITORIES
# =========================================================================

def get_user_repository(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> UserRepository:
    return UserRepositoryImpl(session)


def get_subscription_repository(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> SubscriptionRepository:
    return SubscriptionRepositoryImpl(session)


# =========================================================================
# DOMAIN SERVICES
# =========================================================================

def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    subscription_repository: SubscriptionRepository = Depends(get_subscription_repository),
) -> UserService:
    return UserService(user_repository, subscription_repository)


def get_subscription_service(
    subscription_repository: SubscriptionRepository = Depends(get_subscription_repository),
    user_service: UserService = Depends(get_user_service),
) -> SubscriptionService:
    return SubscriptionService(subscription_repository, user_service)


def get_app_settings() -> Settings:
    return get_settings()
