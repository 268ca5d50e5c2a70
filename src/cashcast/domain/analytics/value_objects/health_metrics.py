"""Financial health score."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class HealthStatus(str, Enum):
    ELITE = "elite"
    HEALTHY = "healthy"
    STABLE = "stable"
    CRITICAL = "critical"


@dataclass(frozen=True)
class HealthMetrics:
    """Score from 0 to 100 blending savings rate and budget adherence."""

    score: int
    status: HealthStatus
    savings_rate: Decimal  # Percent, may be negative
    budget_adherence: Decimal  # Percent of budgets within limit

    @classmethod
    def unknown(cls) -> "HealthMetrics":
        return cls(
            score=0,
            status=HealthStatus.CRITICAL,
            savings_rate=Decimal("0"),
            budget_adherence=Decimal("0"),
        )
