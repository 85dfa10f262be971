# 📄 File: app/modules/user_management/domain/repositories/subscription_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines what subscription-related storage operations the service can perform,
# like listing a user's subscriptions, adding or removing one, and finding the most popular names.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for Subscription persistence, including predicate deletes
# that report affected row counts and the grouped popularity ranking.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - Subscription domain model
# 🔄 Connected Modules / Calls From:
# - Subscription Service (business logic)
# - User Service (cascade delete)
# - Repository Implementation (concrete implementation)

from abc import ABC, abstractmethod
from typing import List, Optional

from app.modules.user_management.domain.models.subscription import Subscription


class SubscriptionRepository(ABC):
    """
    Abstract repository interface for subscription data access operations.
    """

    @abstractmethod
    async def get_by_id(self, subscription_id: int) -> Optional[Subscription]:
        """Get subscription by ID."""
        pass

    @abstractmethod
    async def get_by_user_and_name(self, user_id: int, name: str) -> Optional[Subscription]:
        """Get the subscription a user holds under an exact name."""
        pass

    @abstractmethod
    async def list_by_user(self, user_id: int) -> List[Subscription]:
        """All subscriptions of a user, ordered by id."""
        pass

    @abstractmethod
    async def create(self, user_id: int, name: str) -> Subscription:
        """
        Insert a new subscription with version 0.

        Raises:
            UniqueConstraintViolation: If (user_id, name) already exists
            ForeignKeyViolation: If user_id does not reference a user
        """
        pass

    @abstractmethod
    async def delete_by_user_and_id(self, user_id: int, subscription_id: int, version: int) -> int:
        """
        Delete WHERE id AND user_id AND version.

        Returns:
            Number of rows affected (0 or 1)
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: int) -> int:
        """Delete every subscription of a user and return the number removed."""
        pass

    @abstractmethod
    async def top_names(self, limit: int) -> List[str]:
        """
        The `limit` most frequent subscription names.

        Membership is decided by count descending with ties broken by name
        ascending; the selected names are returned alphabetically.
        """
        pass
