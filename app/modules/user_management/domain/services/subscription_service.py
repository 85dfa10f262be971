# 📄 File: app/modules/user_management/domain/services/subscription_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the rules for subscriptions: they always belong to a real user, a user cannot
# subscribe to the same name twice, and anyone can ask which names are the most popular.
# 🧪 Purpose (Technical Summary):
# Domain service implementing subscription lookup, listing, popularity ranking, creation and
# owner-scoped deletion. Owners are resolved through UserService; store-level failures are
# translated into DuplicateResourceError and ConcurrentModificationError.
# 🔗 Dependencies:
# Subscription domain model, subscription repository, UserService, shared exceptions
# 🔄 Connected Modules / Calls From:
# API endpoints

import logging
from typing import List, Optional

from app.modules.user_management.domain.models.subscription import Subscription
from app.modules.user_management.domain.models.user import is_blank
from app.modules.user_management.domain.repositories.subscription_repository import SubscriptionRepository
from app.modules.user_management.domain.services.user_service import UserService
from app.shared.core.exceptions import (
    ConcurrentModificationError,
    DuplicateResourceError,
    ForeignKeyViolation,
    NotFoundError,
    UniqueConstraintViolation,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_TOP_LIMIT = 3


class SubscriptionService:
    """Domain service for subscription business logic."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        user_service: UserService,
    ):
        self.subscription_repository = subscription_repository
        self.user_service = user_service

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    async def get_subscription_by_id(self, subscription_id: int) -> Subscription:
        logger.debug(f"Fetching subscription by id {subscription_id}")
        subscription = await self.subscription_repository.get_by_id(subscription_id)

        if subscription is None:
            raise NotFoundError(
                f"Subscription with id {subscription_id} not found.",
                resource_type="subscription",
                resource_id=subscription_id,
            )

        return subscription

    async def get_subscription_by_user_and_name(self, name: str, user_id: int) -> Optional[Subscription]:
        logger.debug(f"Searching for subscription named {name} under user {user_id}")
        return await self.subscription_repository.get_by_user_and_name(user_id, name)

    async def list_user_subscriptions(self, user_id: int) -> List[Subscription]:
        """
        All subscriptions of a user ordered by id.

        An unknown user simply has no subscriptions; this never raises NotFoundError.
        """
        logger.debug(f"Fetching subscriptions by user id {user_id}")
        return await self.subscription_repository.list_by_user(user_id)

    async def top_subscriptions(self, limit: int = DEFAULT_TOP_LIMIT) -> List[str]:
        """
        Names of the most subscribed-to subscriptions.

        Membership is decided by subscriber count (ties broken by name), the
        result is presented alphabetically.

        Raises:
            ValidationError: If limit is smaller than 1
        """
        if limit < 1:
            raise ValidationError("Limit must be at least 1", field="limit", value=limit)

        logger.debug(f"Fetching top {limit} subscriptions")
        return await self.subscription_repository.top_names(limit)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    async def create_subscription(self, name: Optional[str], user_id: int) -> Subscription:
        """
        Create a new subscription for an existing user.

        Args:
            name: Subscription name, unique per user
            user_id: Owning user

        Returns:
            Subscription: Created subscription with version 0

        Raises:
            NotFoundError: If the user does not exist
            ValidationError: If the name is missing or blank
            DuplicateResourceError: If the user already holds this name
        """
        owner = await self.user_service.get_user_by_id(user_id)

        if is_blank(name):
            raise ValidationError(
                "Subscription.name cannot be empty or missing",
                field="name",
                value=name,
            )

        if await self.get_subscription_by_user_and_name(name, owner.id) is not None:
            message = f"Attempted duplicate subscription creation for user {owner.username}: {name}"
            logger.warning(message)
            raise DuplicateResourceError(
                message,
                resource_type="subscription",
                field="name",
                value=name,
            )

        try:
            subscription = await self.subscription_repository.create(owner.id, name)
        except UniqueConstraintViolation as e:
            logger.warning(f"Concurrent create won the race for subscription {name} of user {owner.id}")
            raise DuplicateResourceError(
                "Subscription already exists",
                resource_type="subscription",
                field="name",
                value=name,
            ) from e
        except ForeignKeyViolation as e:
            # Owner was deleted between the lookup and the insert.
            raise NotFoundError(
                f"User not found with id: {user_id}",
                resource_type="user",
                resource_id=user_id,
            ) from e

        logger.info(f"Created new subscription with name {name}")
        return subscription

    async def delete_subscription(self, user_id: int, subscription_id: int) -> int:
        """
        Delete a subscription owned by the given user.

        Returns:
            Number of rows removed (0 when the subscription belongs to someone else)

        Raises:
            NotFoundError: If the subscription does not exist
            ConcurrentModificationError: If it changed or vanished after being read
        """
        subscription = await self.get_subscription_by_id(subscription_id)

        deleted = await self.subscription_repository.delete_by_user_and_id(
            user_id, subscription.id, subscription.version
        )

        if deleted == 0:
            if not subscription.is_owned_by(user_id):
                logger.warning(
                    f"Subscription {subscription_id} does not belong to user {user_id}; nothing deleted"
                )
                return 0

            raise ConcurrentModificationError(
                "Failed to delete subscription due to concurrent modification",
                resource_type="subscription",
                resource_id=subscription_id,
                expected_version=subscription.version,
            )

        logger.info(f"Deleted subscription with userId {user_id} and subscriptionId {subscription_id}")
        return deleted
