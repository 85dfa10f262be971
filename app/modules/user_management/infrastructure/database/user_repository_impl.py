# 📄 File: app/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database operations for user accounts, like creating new users,
# finding existing users, renaming them, and removing them.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository using SQLAlchemy ORM. Writes are flushed
# immediately; IntegrityError and StaleDataError are converted to storage-level exceptions.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.user_repository (interface)
# - app.modules.user_management.domain.models.user (domain model)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository wiring)
# - app.modules.user_management.domain.services (user service operations)

"""
User Repository Implementation

This module provides the concrete implementation of the UserRepository interface
using SQLAlchemy for database operations. It handles the mapping between
domain User entities and UserModel database records.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from app.modules.user_management.domain.models.user import User
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.models import UserModel
from app.shared.core.exceptions import OptimisticLockFailure, RepositoryError
from app.shared.infrastructure.database.errors import translate_integrity_error

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the user repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            user_model = await self._session.get(UserModel, user_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve user: {str(e)}", operation="get_by_id", entity="users") from e

        if user_model is None:
            logger.debug(f"User not found: {user_id}")
            return None

        return self._model_to_domain(user_model)

    async def get_by_username(self, username: str) -> Optional[User]:
        try:
            stmt = select(UserModel).where(UserModel.username == username)
            result = await self._session.execute(stmt)
            user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by username {username}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve user by username: {str(e)}",
                operation="get_by_username",
                entity="users",
            ) from e

        return self._model_to_domain(user_model) if user_model else None

    async def create(self, username: str) -> User:
        """
        Create a new user in the database.

        Args:
            username: Username to store exactly as supplied

        Returns:
            User: Created user entity with generated ID and version 0

        Raises:
            UniqueConstraintViolation: If the username already exists
            RepositoryError: For other database errors
        """
        user_model = UserModel(username=username)
        self._session.add(user_model)

        try:
            await self._session.flush()  # Get the generated ID
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User creation rejected by the store: {username}")
            raise translate_integrity_error(e, operation="create", entity="users") from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error during user creation: {str(e)}")
            raise RepositoryError(f"Failed to create user: {str(e)}", operation="create", entity="users") from e

        logger.debug(f"Inserted user row {user_model.id}")
        return self._model_to_domain(user_model)

    async def update(self, user: User) -> User:
        """
        Update an existing user in the database.

        The write is guarded by the version the caller read; the ORM adds
        ``AND version = :read_version`` to the UPDATE.

        Raises:
            OptimisticLockFailure: If the row is gone or its version moved on
            UniqueConstraintViolation: If the new username is taken
        """
        user_model = await self._load_for_write(user, operation="update")

        if user_model.username == user.username:
            return self._model_to_domain(user_model)

        user_model.username = user.username

        try:
            await self._session.flush()
        except StaleDataError as e:
            await self._session.rollback()
            logger.warning(f"Stale update rejected for user {user.id} at version {user.version}")
            raise OptimisticLockFailure(
                f"User {user.id} was modified concurrently",
                operation="update",
                entity="users",
            ) from e
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User update rejected by the store: {user.id}")
            raise translate_integrity_error(e, operation="update", entity="users") from e

        logger.debug(f"Updated user row {user.id} to version {user_model.version}")
        return self._model_to_domain(user_model)

    async def delete(self, user: User) -> None:
        """
        Delete a user from the database, checked against the version read.
        """
        user_model = await self._load_for_write(user, operation="delete")
        await self._session.delete(user_model)

        try:
            await self._session.flush()
        except StaleDataError as e:
            await self._session.rollback()
            logger.warning(f"Stale delete rejected for user {user.id} at version {user.version}")
            raise OptimisticLockFailure(
                f"User {user.id} was modified concurrently",
                operation="delete",
                entity="users",
            ) from e

        logger.debug(f"Deleted user row {user.id}")

    async def _load_for_write(self, user: User, operation: str) -> UserModel:
        user_model = await self._session.get(UserModel, user.id)

        if user_model is None or user_model.version != user.version:
            raise OptimisticLockFailure(
                f"User {user.id} changed since version {user.version} was read",
                operation=operation,
                entity="users",
            )

        return user_model

    def _model_to_domain(self, user_model: UserModel) -> User:
        return User.model_validate(user_model)
