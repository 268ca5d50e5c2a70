"""Financial health score."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_FLOOR, Decimal

from cashcast.domain.analytics.value_objects import (
    BudgetProgress,
    FinancialSummary,
    HealthMetrics,
    HealthStatus,
)
from cashcast.domain.shared.money import round_cents

SAVINGS_RATE_WEIGHT = Decimal("0.4")
BUDGET_ADHERENCE_WEIGHT = Decimal("0.6")
HUNDRED = Decimal("100")


class FinancialHealthScorer:
    """Blend savings rate and budget adherence into a 0-100 score."""

    def score(
        self,
        summary: FinancialSummary,
        budgets: Sequence[BudgetProgress],
    ) -> HealthMetrics:
        if summary.income > 0:
            savings_rate = (summary.income - summary.expense) / summary.income * HUNDRED
        else:
            savings_rate = Decimal("0")

        if budgets:
            within = sum(1 for b in budgets if not b.is_over_budget)
            budget_adherence = Decimal(within) / Decimal(len(budgets)) * HUNDRED
        else:
            budget_adherence = HUNDRED

        raw = savings_rate * SAVINGS_RATE_WEIGHT + budget_adherence * BUDGET_ADHERENCE_WEIGHT
        score = int(raw.to_integral_value(rounding=ROUND_FLOOR))
        score = min(100, max(0, score))

        return HealthMetrics(
            score=score,
            status=self.status_for(score),
            savings_rate=round_cents(savings_rate),
            budget_adherence=round_cents(budget_adherence),
        )

    @staticmethod
    def status_for(score: int) -> HealthStatus:
        if score > 80:
            return HealthStatus.ELITE
        if score > 60:
            return HealthStatus.HEALTHY
        if score > 40:
            return HealthStatus.STABLE
        return HealthStatus.CRITICAL
