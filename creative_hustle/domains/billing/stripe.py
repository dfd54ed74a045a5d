# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Stripe billing provider.

Talks to the Stripe REST API directly with aiohttp. Stripe expects
form-encoded request bodies and bearer authentication with the secret key.

Example:
    provider = StripeBillingProvider(
        secret_key="sk_test_...",
        currency="usd",
    )
    intent = await provider.create_payment_intent(Decimal("29.00"))
    print(intent.client_secret)
"""

import json
import logging
from decimal import Decimal
from typing import Any

import aiohttp

from creative_hustle.domains.billing.exceptions import BillingAPIError
from creative_hustle.domains.billing.provider import (
    BillingProvider,
    PaymentIntent,
    Subscription,
    to_minor_units,
)

logger = logging.getLogger(__name__)


class StripeBillingProvider(BillingProvider):
    """Async HTTP client for the Stripe API.

    Attributes:
        api_base: Base URL of the Stripe API.
        currency: Currency for one-off payment intents.
        timeout: Request timeout.
    """

    name = "stripe"

    def __init__(
        self,
        secret_key: str,
        currency: str = "usd",
        api_base: str = "https://api.stripe.com/v1",
        timeout: int = 30,
    ):
        """Initialize the Stripe client.

        Args:
            secret_key: Stripe secret API key.
            currency: ISO currency code for payment intents.
            api_base: Base URL of the Stripe API.
            timeout: Request timeout in seconds.
        """
        self._secret_key = secret_key
        self.currency = currency
        self.api_base = api_base.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._secret_key}",
            "Accept": "application/json",
        }

    async def _post(self, path: str, data: dict[str, Any]) -> dict[str, Any]:
        """POST a form-encoded body and return the decoded JSON response.

        Raises:
            BillingAPIError: On a non-2xx response or a connection failure.
        """
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.post(
                    f"{self.api_base}{path}",
                    data=data,
                    headers=self._get_headers(),
                ) as response:
                    response_data = await response.json(content_type=None)

                    if 200 <= response.status < 300:
                        return response_data

                    error = (response_data or {}).get("error", {})
                    raise BillingAPIError(
                        message=error.get("message", f"Stripe request to {path} failed"),
                        status_code=response.status,
                        response_body=json.dumps(response_data),
                        details={"type": error.get("type"), "code": error.get("code")},
                    )

        except aiohttp.ClientError as e:
            logger.error("Stripe API connection error: %s", str(e))
            raise BillingAPIError(
                message=f"Failed to connect to Stripe API: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e

    async def create_payment_intent(self, amount: Decimal) -> PaymentIntent:
        cents = to_minor_units(amount)
        data = await self._post(
            "/payment_intents",
            {"amount": str(cents), "currency": self.currency},
        )
        logger.info("Created payment intent: id=%s, amount=%s", data.get("id"), cents)
        return PaymentIntent(client_secret=data["client_secret"], amount=cents)

    async def create_customer(self, email: str, name: str) -> str:
        data = await self._post("/customers", {"email": email, "name": name})
        logger.info("Created Stripe customer: id=%s", data.get("id"))
        return data["id"]

    async def create_subscription(self, customer_id: str, price_id: str) -> Subscription:
        data = await self._post(
            "/subscriptions",
            {
                "customer": customer_id,
                "items[0][price]": price_id,
                "payment_behavior": "default_incomplete",
                "expand[]": "latest_invoice.payment_intent",
            },
        )

        client_secret = None
        invoice = data.get("latest_invoice")
        if isinstance(invoice, dict):
            payment_intent = invoice.get("payment_intent")
            if isinstance(payment_intent, dict):
                client_secret = payment_intent.get("client_secret")

        logger.info(
            "Created subscription: id=%s, customer=%s, price=%s",
            data.get("id"),
            customer_id,
            price_id,
        )
        return Subscription(subscription_id=data["id"], client_secret=client_secret)
