"""
Core package for the User Subscriptions service.
Provides the exception hierarchy shared by every layer.
"""

from .exceptions import (
    ConcurrentModificationError,
    DatabaseError,
    DuplicateResourceError,
    ForeignKeyViolation,
    NotFoundError,
    OptimisticLockFailure,
    RepositoryError,
    TransactionError,
    UniqueConstraintViolation,
    UserSubscriptionsException,
    ValidationError,
)

__all__ = [
    # Domain
    "UserSubscriptionsException",
    "ValidationError",
    "NotFoundError",
    "DuplicateResourceError",
    "ConcurrentModificationError",

    # Storage
    "RepositoryError",
    "UniqueConstraintViolation",
    "ForeignKeyViolation",
    "OptimisticLockFailure",
    "TransactionError",
    "DatabaseError",
]
