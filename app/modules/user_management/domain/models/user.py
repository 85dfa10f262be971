# 📄 File: app/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a user looks like inside the service: a number that identifies them, the unique
# name they picked, and a revision counter that changes every time the user is edited.
# 🧪 Purpose (Technical Summary):
# Domain model for the User entity. Identity is store-assigned, username is unique across
# all users (exact, case-sensitive match) and version is owned by the storage layer.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# user_service.py, subscription_service.py, user_repository_impl.py, user_schemas.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty, or whitespace-only text."""
    return value is None or not value.strip()


class User(BaseModel):
    """
    User domain model.

    - id: store-assigned, immutable
    - username: non-empty, unique across all users, stored exactly as supplied
    - version: 0 at insert, incremented by the store on every update
    """

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: int
    username: str = Field(min_length=1)
    version: int = 0

    def with_username(self, username: str) -> "User":
        """Copy of this user carrying a new username and the version it was read at."""
        return self.model_copy(update={"username": username})

    def has_username(self, username: str) -> bool:
        return self.username == username
