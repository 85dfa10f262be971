# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for managing user accounts: looking a user up,
# creating one, renaming one, and deleting one along with everything they subscribed to.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user endpoints delegating to UserService. Domain exceptions propagate to the
# registered exception handlers, which render {"message", "status"} bodies.
#
# 🔗 Dependencies:
# - FastAPI router and status codes
# - app.modules.user_management.presentation.api.schemas.user_schemas (request/response schemas)
# - app.modules.user_management.presentation.dependencies (service wiring)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

"""
Users API Endpoints

Endpoints:
- GET /users/{user_id}: Get a user
- POST /users: Create a user
- PUT /users/{user_id}: Rename a user (optional version check)
- DELETE /users/{user_id}: Delete a user and their subscriptions (200, empty body)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.modules.user_management.domain.services.user_service import UserService
from app.modules.user_management.presentation.api.schemas.user_schemas import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from app.modules.user_management.presentation.dependencies import get_user_service

logger = logging.getLogger(__name__)

# Create router
users_router = APIRouter(prefix="/users", tags=["Users"])

ERROR_RESPONSES = {
    400: {"description": "Invalid input"},
    404: {"description": "User not found"},
    409: {"description": "Duplicate username or concurrent modification"},
}


@users_router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
    responses={404: ERROR_RESPONSES[404]},
)
async def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.get_user_by_id(user_id)
    return UserResponse.from_domain(user)


@users_router.post(
    "",
    response_model=UserResponse,
    summary="Create user",
    responses={400: ERROR_RESPONSES[400], 409: ERROR_RESPONSES[409]},
)
async def create_user(
    payload: UserCreateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a user with a unique username.

    Returns 409 when the username is taken, including when a concurrent
    request inserted it first.
    """
    user = await user_service.create_user(payload.username)
    return UserResponse.from_domain(user)


@users_router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Rename user",
    responses=ERROR_RESPONSES,
)
async def update_user(
    user_id: int,
    payload: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Replace the username of an existing user.

    When ``version`` is supplied and no longer matches the stored user, the
    request fails with 409 instead of overwriting a newer change.
    """
    user = await user_service.update_user(user_id, payload.username, expected_version=payload.version)
    return UserResponse.from_domain(user)


@users_router.delete(
    "/{user_id}",
    response_class=Response,
    summary="Delete user",
    responses={404: ERROR_RESPONSES[404], 409: ERROR_RESPONSES[409]},
)
async def delete_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    await user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_200_OK)
