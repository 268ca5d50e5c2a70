"""Budget value object."""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BudgetPeriod(str, Enum):
    MONTHLY = "monthly"
    WEEKLY = "weekly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class Budget(BaseModel):
    """A spending limit for one category over a recurring period.

    The amount spent is always derived from transactions, never stored.
    """

    category: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., description="Spending limit for one period")
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    start_date: date

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
