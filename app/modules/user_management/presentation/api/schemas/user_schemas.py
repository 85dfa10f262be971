# 📄 File: app/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of user data going in and out of the API, like what a caller
# must send to create or rename a user and what they get back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the user endpoints. Blank usernames are rejected at the
# boundary with a per-field message; the domain service re-validates for non-HTTP callers.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - app.modules.user_management.domain.models.user (domain model)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.users (user endpoints)

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.modules.user_management.domain.models.user import User, is_blank


def require_text(value: Optional[str], field_label: str) -> str:
    """Reject None, empty and whitespace-only values with a readable message."""
    if is_blank(value):
        raise PydanticCustomError("blank", f"Field {field_label} cannot be blank")
    return value


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class UserCreateRequest(BaseModel):
    """User creation request."""

    username: Optional[str] = Field(
        default=None,
        validate_default=True,
        max_length=255,
        description="Unique username, stored exactly as supplied",
        examples=["alice"],
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: Optional[str]) -> str:
        return require_text(value, "User.username")


class UserUpdateRequest(UserCreateRequest):
    """
    User rename request.

    ``version`` is optional: when supplied, the update is rejected with 409
    if the stored user has moved past it.
    """

    version: Optional[int] = Field(
        default=None,
        ge=0,
        description="Version the caller last read",
    )


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class UserResponse(BaseModel):
    """User representation returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    version: int

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls.model_validate(user)
