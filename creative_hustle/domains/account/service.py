# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Account service for user and subscription operations.

This module provides the AccountService class for:
- Current user lookup and user creation
- Tier upgrades
- Payment intent and subscription creation at the billing provider
"""

from __future__ import annotations

import logging
from decimal import Decimal

from creative_hustle.domains.billing import (
    BillingProvider,
    MockBillingProvider,
    PaymentIntent,
    Subscription,
)
from creative_hustle.infrastructure.storage import (
    DuplicateRecordError,
    RecordNotFoundError,
    Storage,
)
from creative_hustle.models.common import UserTier
from creative_hustle.models.user import User, UserCreate

logger = logging.getLogger(__name__)


class AccountServiceError(Exception):
    """Base exception for account service errors."""

    pass


class UserNotFoundError(AccountServiceError):
    """Raised when a user is not found."""

    def __init__(self, user_id: int | None = None) -> None:
        self.user_id = user_id
        super().__init__("User not found")


class UserAlreadyExistsError(AccountServiceError):
    """Raised when a username or email is already taken."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"A user with this {field} already exists")


class AccountService:
    """Service for user accounts and their subscription state.

    Attributes:
        storage: Entity store.
        billing: Billing provider used for payments and subscriptions.
        price_id: Recurring price used for premium subscriptions.
    """

    def __init__(
        self,
        storage: Storage,
        billing: BillingProvider | None = None,
        price_id: str = "price_default",
    ) -> None:
        """Initialize account service.

        Args:
            storage: Entity store.
            billing: Billing provider. Defaults to the mock provider.
            price_id: Billing price for subscriptions.
        """
        self.storage = storage
        self.billing = billing or MockBillingProvider()
        self.price_id = price_id

    async def get_user(self, user_id: int) -> User:
        """Get a user by id.

        Raises:
            UserNotFoundError: If no such user exists.
        """
        user = await self.storage.get_user(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self) -> list[User]:
        """List all user accounts in creation order."""
        return await self.storage.list_users()

    async def create_user(self, data: UserCreate) -> User:
        """Create a user account.

        Raises:
            UserAlreadyExistsError: If the username or email is taken.
        """
        try:
            user = await self.storage.create_user(data)
        except DuplicateRecordError as e:
            raise UserAlreadyExistsError(e.field, e.value) from e

        logger.info("Created user: %s (%s)", user.username, user.id)
        return user

    async def upgrade(self, user_id: int, tier: UserTier) -> User:
        """Set a user's tier.

        Any tier may be set, including a downgrade back to free.

        Raises:
            UserNotFoundError: If no such user exists.
        """
        try:
            user = await self.storage.update_user_tier(user_id, tier)
        except RecordNotFoundError as e:
            raise UserNotFoundError(user_id) from e

        logger.info("Changed tier: user=%s, tier=%s", user.id, user.tier.value)
        return user

    async def create_payment_intent(self, amount: Decimal) -> PaymentIntent:
        """Start a one-off payment for ``amount`` currency units.

        Raises:
            BillingAPIError: If the billing provider fails.
        """
        return await self.billing.create_payment_intent(amount)

    async def create_subscription(self, user_id: int) -> Subscription:
        """Subscribe a user to the premium price.

        Reuses the user's billing customer when one is already stored, and
        records the customer and subscription ids on the user.

        Raises:
            UserNotFoundError: If no such user exists.
            BillingAPIError: If the billing provider fails.
        """
        user = await self.get_user(user_id)

        customer_id = user.billing_customer_id
        if not customer_id:
            customer_id = await self.billing.create_customer(user.email, user.username)

        subscription = await self.billing.create_subscription(customer_id, self.price_id)
        await self.storage.update_user_billing(
            user.id,
            customer_id=customer_id,
            subscription_id=subscription.subscription_id,
        )

        logger.info(
            "Created subscription: user=%s, subscription=%s, provider=%s",
            user.id,
            subscription.subscription_id,
            self.billing.name,
        )
        return subscription
