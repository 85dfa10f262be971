# 📄 File: app/modules/user_management/domain/models/subscription.py
# 🧭 Purpose (Layman Explanation):
# Defines a subscription: a named thing a user follows. A user cannot follow the same name twice,
# and every subscription always belongs to a user that exists.
# 🧪 Purpose (Technical Summary):
# Domain model for the Subscription entity. (user_id, name) is unique, user_id references an
# existing User and version is owned by the storage layer.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# subscription_service.py, subscription_repository_impl.py, subscription_schemas.py

from pydantic import BaseModel, ConfigDict, Field


class Subscription(BaseModel):
    """Subscription domain model owned by exactly one user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(min_length=1)
    user_id: int
    version: int = 0

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id
