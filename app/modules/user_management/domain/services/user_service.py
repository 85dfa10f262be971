# 📄 File: app/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the rules for managing users: a username must not be empty, two users can
# never share a name, and two people editing the same user at once cannot silently overwrite each other.
# 🧪 Purpose (Technical Summary):
# Domain service implementing user lookup, creation, rename and cascade deletion. Validation and
# uniqueness pre-checks run through the repositories; store-level constraint and version failures
# are translated into DuplicateResourceError and ConcurrentModificationError at the write site.
# 🔗 Dependencies:
# User domain model, user and subscription repositories, shared exceptions
# 🔄 Connected Modules / Calls From:
# Subscription service (owner resolution), API endpoints

import logging
from typing import Optional

from app.modules.user_management.domain.models.user import User, is_blank
from app.modules.user_management.domain.repositories.subscription_repository import SubscriptionRepository
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.shared.core.exceptions import (
    ConcurrentModificationError,
    DuplicateResourceError,
    NotFoundError,
    OptimisticLockFailure,
    UniqueConstraintViolation,
    ValidationError,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user management business logic.

    Repositories are injected by the caller and share one unit of work, so a
    failure anywhere in an operation rolls the whole operation back.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        subscription_repository: SubscriptionRepository,
    ):
        self.user_repository = user_repository
        self.subscription_repository = subscription_repository

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    async def get_user_by_id(self, user_id: int) -> User:
        """
        Get user by ID.

        Raises:
            NotFoundError: If no user has this ID
        """
        logger.debug(f"Fetching user by id {user_id}")
        user = await self.user_repository.get_by_id(user_id)

        if user is None:
            message = f"User not found with id: {user_id}"
            logger.warning(message)
            raise NotFoundError(message, resource_type="user", resource_id=user_id)

        return user

    async def get_user_by_username(self, username: str) -> Optional[User]:
        logger.debug(f"Fetching user by username {username}")
        return await self.user_repository.get_by_username(username)

    # =========================================================================
    # USER CREATION AND LIFECYCLE
    # =========================================================================

    async def create_user(self, username: Optional[str]) -> User:
        """
        Create a new user with business rule validation.

        Args:
            username: Requested username, stored exactly as supplied

        Returns:
            User: Created user with version 0

        Raises:
            ValidationError: If the username is missing or blank
            DuplicateResourceError: If the username is already taken
        """
        if is_blank(username):
            raise ValidationError(
                "Invalid data when trying to create a user: Username is empty or missing",
                field="username",
                value=username,
            )

        if await self.get_user_by_username(username) is not None:
            logger.warning(f"Rejected duplicate username on create: {username}")
            raise DuplicateResourceError(
                "User with this username already exists",
                resource_type="user",
                field="username",
                value=username,
            )

        try:
            user = await self.user_repository.create(username)
        except UniqueConstraintViolation as e:
            logger.warning(f"Concurrent create won the race for username: {username}")
            raise DuplicateResourceError(
                "Username already exists",
                resource_type="user",
                field="username",
                value=username,
            ) from e

        logger.info(f"Successfully created user with username {username}")
        return user

    async def update_user(
        self,
        user_id: int,
        username: Optional[str],
        expected_version: Optional[int] = None,
    ) -> User:
        """
        Replace a user's username.

        Args:
            user_id: User to rename
            username: New username
            expected_version: Version the caller last saw; checked when given

        Returns:
            User: Updated user (version incremented when the name changed)

        Raises:
            ValidationError: If the username is missing or blank
            DuplicateResourceError: If a different user owns the username
            NotFoundError: If the user does not exist
            ConcurrentModificationError: If the user changed since it was read
        """
        if is_blank(username):
            raise ValidationError(
                "Invalid data when updating the user: Username is empty or missing",
                field="username",
                value=username,
            )

        owner = await self.get_user_by_username(username)
        if owner is not None and owner.id != user_id:
            logger.warning(f"Rejected rename of user {user_id} to taken username {username}")
            raise DuplicateResourceError(
                "User with this username already exists",
                resource_type="user",
                field="username",
                value=username,
            )

        user = await self.get_user_by_id(user_id)

        if expected_version is not None and expected_version != user.version:
            logger.warning(
                f"Stale update of user {user_id}: expected version {expected_version}, stored {user.version}"
            )
            raise ConcurrentModificationError(
                "Failed to update user due to concurrent modification",
                resource_type="user",
                resource_id=user_id,
                expected_version=expected_version,
            )

        if user.has_username(username):
            logger.debug(f"User {user_id} already has username {username}, nothing to update")
            return user

        try:
            updated = await self.user_repository.update(user.with_username(username))
        except OptimisticLockFailure as e:
            raise ConcurrentModificationError(
                "Failed to update user due to concurrent modification",
                resource_type="user",
                resource_id=user_id,
                expected_version=user.version,
            ) from e
        except UniqueConstraintViolation as e:
            raise DuplicateResourceError(
                "Username already exists",
                resource_type="user",
                field="username",
                value=username,
            ) from e

        logger.info(f"Updated user with id {user_id}")
        return updated

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user together with all of their subscriptions.

        Raises:
            NotFoundError: If the user does not exist
            ConcurrentModificationError: If the user changed since it was read
        """
        user = await self.get_user_by_id(user_id)

        removed = await self.subscription_repository.delete_by_user(user_id)

        try:
            await self.user_repository.delete(user)
        except OptimisticLockFailure as e:
            raise ConcurrentModificationError(
                "Failed to delete user due to concurrent modification",
                resource_type="user",
                resource_id=user_id,
                expected_version=user.version,
            ) from e

        logger.info(f"Deleted user with id {user_id} and {removed} subscription(s)")
