# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing provider used when no credentials are configured.

Returns fixed demo secrets so the upgrade flow can be exercised locally.
"""

import hashlib
import logging
from decimal import Decimal

from creative_hustle.domains.billing.provider import (
    BillingProvider,
    PaymentIntent,
    Subscription,
    to_minor_units,
)

logger = logging.getLogger(__name__)

MOCK_PAYMENT_SECRET = "pi_mock_client_secret_for_demo"
MOCK_SETUP_SECRET = "seti_mock_client_secret_for_demo"
MOCK_SUBSCRIPTION_ID = "sub_mock_subscription_id"


class MockBillingProvider(BillingProvider):
    """In-process stand-in for the billing provider."""

    name = "mock"

    async def create_payment_intent(self, amount: Decimal) -> PaymentIntent:
        logger.info("Mock payment intent: amount=%s", amount)
        return PaymentIntent(client_secret=MOCK_PAYMENT_SECRET, amount=to_minor_units(amount))

    async def create_customer(self, email: str, name: str) -> str:
        digest = hashlib.sha256(email.casefold().encode("utf-8")).hexdigest()[:14]
        return f"cus_mock_{digest}"

    async def create_subscription(self, customer_id: str, price_id: str) -> Subscription:
        logger.info("Mock subscription: customer=%s, price=%s", customer_id, price_id)
        return Subscription(subscription_id=MOCK_SUBSCRIPTION_ID, client_secret=MOCK_SETUP_SECRET)
