# 📄 File: app/modules/user_management/infrastructure/database/subscription_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for subscriptions, like adding a subscription to a user,
# listing or removing a user's subscriptions, and counting which names are most popular.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of SubscriptionRepository using SQLAlchemy. Deletes are issued as
# predicate statements that report the affected row count; the popularity ranking is a grouped
# count subquery ordered by count then name, re-ordered alphabetically outside.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.subscription_repository (interface)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository wiring)
# - app.modules.user_management.domain.services (user and subscription services)

import logging
from typing import List, Optional

from sqlalchemy import delete, desc, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.subscription import Subscription
from app.modules.user_management.domain.repositories.subscription_repository import SubscriptionRepository
from app.modules.user_management.infrastructure.database.models import SubscriptionModel
from app.shared.core.exceptions import RepositoryError
from app.shared.infrastructure.database.errors import translate_integrity_error

logger = logging.getLogger(__name__)


class SubscriptionRepositoryImpl(SubscriptionRepository):
    """SQLAlchemy implementation of the SubscriptionRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, subscription_id: int) -> Optional[Subscription]:
        subscription_model = await self._run(
            "get_by_id", self._session.get(SubscriptionModel, subscription_id)
        )
        return self._model_to_domain(subscription_model) if subscription_model else None

    async def get_by_user_and_name(self, user_id: int, name: str) -> Optional[Subscription]:
        stmt = select(SubscriptionModel).where(
            SubscriptionModel.user_id == user_id,
            SubscriptionModel.name == name,
        )
        result = await self._run("get_by_user_and_name", self._session.execute(stmt))
        subscription_model = result.scalar_one_or_none()
        return self._model_to_domain(subscription_model) if subscription_model else None

    async def list_by_user(self, user_id: int) -> List[Subscription]:
        stmt = (
            select(SubscriptionModel)
            .where(SubscriptionModel.user_id == user_id)
            .order_by(SubscriptionModel.id)
        )
        result = await self._run("list_by_user", self._session.execute(stmt))
        return [self._model_to_domain(model) for model in result.scalars().all()]

    async def create(self, user_id: int, name: str) -> Subscription:
        """
        Create a new subscription.

        Raises:
            UniqueConstraintViolation: If the user already holds this name
            ForeignKeyViolation: If the user does not exist
        """
        subscription_model = SubscriptionModel(user_id=user_id, name=name)
        self._session.add(subscription_model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Subscription creation rejected by the store: user={user_id} name={name}")
            raise translate_integrity_error(e, operation="create", entity="subscriptions") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during subscription creation: {str(e)}")
            raise RepositoryError(
                f"Failed to create subscription: {str(e)}",
                operation="create",
                entity="subscriptions",
            ) from e

        logger.debug(f"Inserted subscription row {subscription_model.id} for user {user_id}")
        return self._model_to_domain(subscription_model)

    async def delete_by_user_and_id(self, user_id: int, subscription_id: int, version: int) -> int:
        stmt = delete(SubscriptionModel).where(
            SubscriptionModel.id == subscription_id,
            SubscriptionModel.user_id == user_id,
            SubscriptionModel.version == version,
        )
        result = await self._run("delete_by_user_and_id", self._session.execute(stmt))
        logger.debug(f"Deleted {result.rowcount} subscription row(s) for id={subscription_id} user={user_id}")
        return result.rowcount

    async def delete_by_user(self, user_id: int) -> int:
        stmt = delete(SubscriptionModel).where(SubscriptionModel.user_id == user_id)
        result = await self._run("delete_by_user", self._session.execute(stmt))
        logger.debug(f"Deleted {result.rowcount} subscription row(s) of user {user_id}")
        return result.rowcount

    async def top_names(self, limit: int) -> List[str]:
        subscriber_count = func.count(SubscriptionModel.id).label("subscriber_count")
        ranked = (
            select(SubscriptionModel.name, subscriber_count)
            .group_by(SubscriptionModel.name)
            .order_by(desc(subscriber_count), SubscriptionModel.name.asc())
            .limit(limit)
            .subquery()
        )
        stmt = select(ranked.c.name).order_by(ranked.c.name.asc())
        result = await self._run("top_names", self._session.execute(stmt))
        return list(result.scalars().all())

    async def _run(self, operation: str, awaitable):
        try:
            return await awaitable
        except SQLAlchemyError as e:
            logger.error(f"Database error in subscription {operation}: {str(e)}")
            raise RepositoryError(
                f"Subscription {operation} failed: {str(e)}",
                operation=operation,
                entity="subscriptions",
            ) from e

    def _model_to_domain(self, subscription_model: SubscriptionModel) -> Subscription:
        return Subscription.model_validate(subscription_model)
