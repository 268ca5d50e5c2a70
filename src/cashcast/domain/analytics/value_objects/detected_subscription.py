"""Recurring charge found in transaction history."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class DetectedSubscription:
    name: str
    amount: Decimal  # Positive magnitude per charge
    occurrences: int
    last_charged: date
    next_expected: date
