"""Safe-to-spend result."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class SafeSpendMetrics:
    """Daily discretionary spending ceiling until the next payday.

    Recomputed on every request; amounts are rounded to cents.
    """

    safe_daily_limit: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    emergency_fund_estimate: Decimal
    days_until_payday: int
    risk_level: RiskLevel
    total_recurring_bills: Decimal = Decimal("0")

    @classmethod
    def zero(cls) -> "SafeSpendMetrics":
        """Placeholder when the inputs could not be loaded; reads as high risk."""
        return cls(
            safe_daily_limit=Decimal("0"),
            monthly_income=Decimal("0"),
            monthly_expenses=Decimal("0"),
            emergency_fund_estimate=Decimal("0"),
            days_until_payday=0,
            risk_level=RiskLevel.HIGH,
        )


@dataclass(frozen=True)
class AffordabilityAssessment:
    """Whether a planned purchase fits in what can be spent before payday."""

    amount: Decimal
    description: str
    spendable_until_payday: Decimal
    fits: bool
