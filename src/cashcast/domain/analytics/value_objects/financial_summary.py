"""Headline figures for a user's finances."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FinancialSummary:
    balance: Decimal
    income: Decimal
    expense: Decimal  # Positive magnitude
    net: Decimal
    currency: str = "USD"

    @classmethod
    def empty(cls) -> "FinancialSummary":
        zero = Decimal("0")
        return cls(balance=zero, income=zero, expense=zero, net=zero)
