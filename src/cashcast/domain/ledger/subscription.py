"""Subscription value object."""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class Subscription(BaseModel):
    """A recurring bill known to the ledger."""

    amount: Decimal = Field(..., description="Charge per billing cycle")
    next_billing_date: date
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    name: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE
