# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Billing endpoint schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    """Request body for a one-off payment (amount in currency units)."""

    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class PaymentIntentResponse(BaseModel):
    """Client secret for completing a payment in the browser."""

    client_secret: str
    amount: int = Field(description="Amount in the smallest currency unit")


class SubscriptionResponse(BaseModel):
    """Client secret and id of a newly created subscription."""

    subscription_id: str
    client_secret: str | None = None
