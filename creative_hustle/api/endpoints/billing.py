# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing pass-through API endpoints.

This module provides endpoints for:
- POST /create-payment-intent - Start a one-off payment
- POST /create-subscription - Subscribe the current user to premium

Both endpoints are rate limited per client with the limiter of the
application, so the router is built by create_router() per application.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from slowapi import Limiter

from creative_hustle.api.dependencies import get_account_service, get_current_user
from creative_hustle.domains.account import AccountService, UserNotFoundError
from creative_hustle.domains.billing import BillingError
from creative_hustle.models.billing import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    SubscriptionResponse,
)
from creative_hustle.models.user import User

logger = logging.getLogger(__name__)


async def create_payment_intent(
    request: Request,
    data: PaymentIntentRequest,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> PaymentIntentResponse:
    """Create a payment intent for ``data.amount``.

    Raises:
        HTTPException: 502 if the billing provider fails.
    """
    try:
        intent = await service.create_payment_intent(data.amount)
    except BillingError as e:
        logger.error("Payment intent failed: user=%s, error=%s", current_user.id, str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error creating payment intent: {e.message}",
        )

    return PaymentIntentResponse(client_secret=intent.client_secret, amount=intent.amount)


async def create_subscription(
    request: Request,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> SubscriptionResponse:
    """Create a subscription for the current user.

    Raises:
        HTTPException: 404 if the user vanished, 502 if the billing provider fails.
    """
    try:
        subscription = await service.create_subscription(current_user.id)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except BillingError as e:
        logger.error("Subscription failed: user=%s, error=%s", current_user.id, str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error creating subscription: {e.message}",
        )

    return SubscriptionResponse(
        subscription_id=subscription.subscription_id,
        client_secret=subscription.client_secret,
    )


def create_router(limiter: Limiter, limit_value: str) -> APIRouter:
    """Build the billing router with both endpoints rate limited.

    Args:
        limiter: Limiter of the application.
        limit_value: Limit string applied to each endpoint, e.g. "10/minute".

    Returns:
        Router with the billing endpoints.
    """
    router = APIRouter()
    rate_limited = limiter.limit(limit_value)

    router.add_api_route(
        "/create-payment-intent",
        rate_limited(create_payment_intent),
        methods=["POST"],
        response_model=PaymentIntentResponse,
        summary="Create payment intent",
        description="Create a one-off payment at the billing provider and return its client secret.",
    )
    router.add_api_route(
        "/create-subscription",
        rate_limited(create_subscription),
        methods=["POST"],
        response_model=SubscriptionResponse,
        summary="Create subscription",
        description="Subscribe the current user to the premium price at the billing provider.",
    )
    return router
