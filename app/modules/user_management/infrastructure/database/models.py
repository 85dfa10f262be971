# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how users and their subscriptions are stored in the database,
# including the rules that stop duplicate names and orphaned subscriptions.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the users and subscriptions tables, with unique constraints,
# an ON DELETE CASCADE foreign key, and a version column used for optimistic locking.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py and subscription_repository_impl.py (CRUD operations)
# - Database migration scripts (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: user accounts with unique usernames
- SubscriptionModel: named subscriptions, unique per (user_id, name)

Both tables carry a ``version`` column mapped through ``version_id_col``:
0 on insert, +1 on every ORM UPDATE, and every ORM UPDATE/DELETE is
guarded with ``AND version = :read_version``.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, String, UniqueConstraint

from app.shared.config.database import DatabaseBase as Base


def next_version(current_version):
    """Version generator: 0 for a new row, +1 on every update."""
    return 0 if current_version is None else current_version + 1


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for user accounts.
    """
    __tablename__ = "users"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned user identifier"
    )
    username = Column(
        String(255),
        unique=True,
        nullable=False,
        comment="Unique username (exact, case-sensitive)"
    )
    version = Column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="Optimistic locking version"
    )

    # Ids are never reused, even after the highest row is deleted.
    __table_args__ = {"sqlite_autoincrement": True}

    __mapper_args__ = {
        "version_id_col": version,
        "version_id_generator": next_version,
    }

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username}, version={self.version})>"


# =============================================================================
# SUBSCRIPTION MODEL
# =============================================================================

class SubscriptionModel(Base):
    """
    SQLAlchemy model for user subscriptions.
    """
    __tablename__ = "subscriptions"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned subscription identifier"
    )
    name = Column(
        String(255),
        nullable=False,
        comment="Subscription name, unique per user"
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="Owning user"
    )
    version = Column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="Optimistic locking version"
    )

    __table_args__ = (
        UniqueConstraint("user_id", "name"),
        Index("ix_subscriptions_user_id", "user_id"),
        Index("ix_subscriptions_name", "name"),
        {"sqlite_autoincrement": True},
    )

    __mapper_args__ = {
        "version_id_col": version,
        "version_id_generator": next_version,
    }

    def __repr__(self) -> str:
        return f"<SubscriptionModel(id={self.id}, name={self.name}, user_id={self.user_id})>"


# Export all models for use in repository implementations
__all__ = [
    "UserModel",
    "SubscriptionModel",
]
