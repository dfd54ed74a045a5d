# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing provider pass-through.

The real provider is used when a secret key is configured; otherwise the
mock provider hands out demo client secrets.
"""

from creative_hustle.core.config import BillingSettings
from creative_hustle.domains.billing.exceptions import BillingAPIError, BillingError
from creative_hustle.domains.billing.mock import MockBillingProvider
from creative_hustle.domains.billing.provider import (
    BillingProvider,
    PaymentIntent,
    Subscription,
    to_minor_units,
)
from creative_hustle.domains.billing.stripe import StripeBillingProvider


def get_billing_provider(settings: BillingSettings) -> BillingProvider:
    """Build the billing provider for the given settings."""
    if settings.is_configured:
        return StripeBillingProvider(
            secret_key=settings.secret_key.get_secret_value(),
            currency=settings.currency,
            api_base=settings.api_base,
            timeout=settings.timeout,
        )
    return MockBillingProvider()


__all__ = [
    "BillingError",
    "BillingAPIError",
    "BillingProvider",
    "PaymentIntent",
    "Subscription",
    "to_minor_units",
    "StripeBillingProvider",
    "MockBillingProvider",
    "get_billing_provider",
]
