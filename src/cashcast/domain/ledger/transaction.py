"""Transaction value object."""

import datetime as dt
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Transaction(BaseModel):
    """A ledger transaction.

    Negative amounts are expenses, positive amounts are income.
    """

    amount: Decimal = Field(..., description="Signed amount")
    date: dt.date
    category: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("date", mode="before")
    @classmethod
    def _timestamp_to_date(cls, v: Any) -> Any:
        # Stores often hand back full timestamps; only the day matters here
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return v[:10]
        return v

    def is_expense(self) -> bool:
        return self.amount < 0

    def is_income(self) -> bool:
        return self.amount > 0
