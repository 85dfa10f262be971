# 📄 File: app/modules/user_management/presentation/api/v1/subscriptions.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for a user's subscriptions: listing them, adding one,
# removing one, and showing which subscription names are the most popular overall.
#
# 🧪 Purpose (Technical Summary):
# FastAPI subscription endpoints delegating to SubscriptionService. The popularity ranking
# size comes from the TOP_SUBSCRIPTIONS_LIMIT setting.
#
# 🔗 Dependencies:
# - FastAPI router and status codes
# - app.modules.user_management.presentation.api.schemas.subscription_schemas
# - app.modules.user_management.presentation.dependencies (service wiring)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.modules.user_management.domain.services.subscription_service import SubscriptionService
from app.modules.user_management.presentation.api.schemas.subscription_schemas import (
    SubscriptionCreateRequest,
    SubscriptionResponse,
)
from app.modules.user_management.presentation.dependencies import (
    get_app_settings,
    get_subscription_service,
)
from app.shared.config.settings import Settings

logger = logging.getLogger(__name__)

subscriptions_router = APIRouter(tags=["Subscriptions"])


@subscriptions_router.get(
    "/users/{user_id}/subscriptions",
    response_model=List[SubscriptionResponse],
    summary="List user subscriptions",
)
async def list_user_subscriptions(
    user_id: int,
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> List[SubscriptionResponse]:
    """Subscriptions of a user ordered by id; empty for an unknown user."""
    subscriptions = await subscription_service.list_user_subscriptions(user_id)
    return [SubscriptionResponse.from_domain(subscription) for subscription in subscriptions]


@subscriptions_router.post(
    "/users/{user_id}/subscriptions",
    response_model=SubscriptionResponse,
    summary="Create subscription",
    responses={
        400: {"description": "Invalid input"},
        404: {"description": "User not found"},
        409: {"description": "User already holds this subscription name"},
    },
)
async def create_subscription(
    user_id: int,
    payload: SubscriptionCreateRequest,
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    subscription = await subscription_service.create_subscription(payload.name, user_id)
    return SubscriptionResponse.from_domain(subscription)


@subscriptions_router.delete(
    "/users/{user_id}/subscriptions/{subscription_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete subscription",
    responses={
        404: {"description": "Subscription not found"},
        409: {"description": "Subscription changed concurrently"},
    },
)
async def delete_subscription(
    user_id: int,
    subscription_id: int,
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> Response:
    """
    Delete a subscription of the given user.

    A subscription owned by another user is left untouched and the call
    still succeeds.
    """
    await subscription_service.delete_subscription(user_id, subscription_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@subscriptions_router.get(
    "/subscriptions/top",
    response_model=List[str],
    summary="Most popular subscription names",
)
async def top_subscriptions(
    subscription_service: SubscriptionService = Depends(get_subscription_service),
    settings: Settings = Depends(get_app_settings),
) -> List[str]:
    return await subscription_service.top_subscriptions(settings.TOP_SUBSCRIPTIONS_LIMIT)
