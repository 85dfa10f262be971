# 📄 File: app/modules/user_management/presentation/api/schemas/subscription_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of subscription data going in and out of the API.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the subscription endpoints. The owner is exposed under
# the ``user`` key to keep the public wire format.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.subscriptions (subscription endpoints)

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.modules.user_management.domain.models.subscription import Subscription
from app.modules.user_management.presentation.api.schemas.user_schemas import require_text


class SubscriptionCreateRequest(BaseModel):
    """Subscription creation request; the owner comes from the path."""

    name: Optional[str] = Field(
        default=None,
        validate_default=True,
        max_length=255,
        description="Subscription name, unique per user",
        examples=["news"],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: Optional[str]) -> str:
        return require_text(value, "Subscription.name")


class SubscriptionResponse(BaseModel):
    """Subscription representation returned by the API."""

    id: int
    name: str
    user: int = Field(description="Owning user id")
    version: int

    @classmethod
    def from_domain(cls, subscription: Subscription) -> "SubscriptionResponse":
        return cls(
            id=subscription.id,
            name=subscription.name,
            user=subscription.user_id,
            version=subscription.version,
        )
