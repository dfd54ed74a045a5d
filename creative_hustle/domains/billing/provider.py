# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing provider interface.

Payment processing itself happens at the provider. This service only asks
the provider for client secrets that the browser uses to finish a payment.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class PaymentIntent:
    """A one-off payment awaiting confirmation by the client.

    Attributes:
        client_secret: Secret handed to the browser.
        amount: Amount in the smallest currency unit (cents).
    """

    client_secret: str
    amount: int


@dataclass(frozen=True)
class Subscription:
    """A newly created, not yet paid subscription.

    Attributes:
        subscription_id: Provider subscription reference.
        client_secret: Secret for confirming the first payment, if any.
    """

    subscription_id: str
    client_secret: str | None


def to_minor_units(amount: Decimal) -> int:
    """Convert a currency amount to cents, rounding half-up."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class BillingProvider(ABC):
    """External billing service."""

    name: str = "base"

    @abstractmethod
    async def create_payment_intent(self, amount: Decimal) -> PaymentIntent:
        """Start a one-off payment of ``amount`` currency units.

        Raises:
            BillingAPIError: If the provider rejects the request.
        """

    @abstractmethod
    async def create_customer(self, email: str, name: str) -> str:
        """Register a customer and return its provider reference.

        Raises:
            BillingAPIError: If the provider rejects the request.
        """

    @abstractmethod
    async def create_subscription(self, customer_id: str, price_id: str) -> Subscription:
        """Subscribe a customer to a recurring price.

        Raises:
            BillingAPIError: If the provider rejects the request.
        """
