# 📄 File: app/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines what user-related storage operations the service can perform,
# like finding a user, adding one, renaming one, or removing one.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for User persistence. Implementations flush every write so
# constraint and version failures surface at the call site as RepositoryError subclasses.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - User domain model
# 🔄 Connected Modules / Calls From:
# - User Service (business logic)
# - Repository Implementation (concrete implementation)

from abc import ABC, abstractmethod
from typing import Optional

from app.modules.user_management.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository interface for user data access operations.

    Implementations are bound to one unit of work and raise only storage-level
    exceptions (UniqueConstraintViolation, OptimisticLockFailure, RepositoryError).
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username."""
        pass

    @abstractmethod
    async def create(self, username: str) -> User:
        """
        Insert a new user with version 0.

        Raises:
            UniqueConstraintViolation: If the username is already taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Write user.username to the row whose version equals user.version.

        Raises:
            OptimisticLockFailure: If the row changed since it was read
            UniqueConstraintViolation: If the new username is already taken
        """
        pass

    @abstractmethod
    async def delete(self, user: User) -> None:
        """
        Delete the user row, checked against user.version.

        Raises:
            OptimisticLockFailure: If the row changed since it was read
        """
        pass
