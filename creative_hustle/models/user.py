# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User entity and API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from creative_hustle.models.common import Record, UserTier


class User(Record):
    """Stored user account.

    Attributes:
        username: Unique login name.
        email: Unique email address.
        password: Opaque credential string, never serialized by the API.
        tier: Subscription tier.
        billing_customer_id: Customer reference at the billing provider.
        billing_subscription_id: Subscription reference at the billing provider.
        created_at: Creation timestamp.
    """

    username: str
    email: str
    password: str
    tier: UserTier = UserTier.FREE
    billing_customer_id: str | None = None
    billing_subscription_id: str | None = None
    created_at: datetime


class UserCreate(BaseModel):
    """Request body for creating a user."""

    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    tier: UserTier = UserTier.FREE


class UserResponse(BaseModel):
    """Public representation of a user (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    tier: UserTier
    billing_customer_id: str | None = None
    billing_subscription_id: str | None = None
    created_at: datetime


class UpgradeRequest(BaseModel):
    """Request body for changing the current user's tier."""

    tier: UserTier
