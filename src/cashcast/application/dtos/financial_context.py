"""Consolidated snapshot handed to the advisory text generator."""

from __future__ import annotations

from dataclasses import dataclass, field

from cashcast.domain.analytics.value_objects import (
    AffordabilityAssessment,
    BudgetProgress,
    CashFlowPoint,
    DetectedSubscription,
    FinancialSummary,
    ForecastPoint,
    HealthMetrics,
    SafeSpendMetrics,
    SpendingForecast,
)
from cashcast.domain.ledger import Subscription, Transaction


@dataclass
class FinancialContext:
    """Everything the advisory layer may quote, already computed.

    Fields whose data could not be loaded hold their empty/zero form and are
    named in ``degraded``.
    """

    summary: FinancialSummary = field(default_factory=FinancialSummary.empty)
    recent_transactions: list[Transaction] = field(default_factory=list)
    budgets: list[BudgetProgress] = field(default_factory=list)
    subscriptions: list[Subscription] = field(default_factory=list)
    detected_subscriptions: list[DetectedSubscription] = field(default_factory=list)
    anomalies: list[Transaction] = field(default_factory=list)
    safe_spend: SafeSpendMetrics = field(default_factory=SafeSpendMetrics.zero)
    health: HealthMetrics = field(default_factory=HealthMetrics.unknown)
    spending_forecast: SpendingForecast = field(default_factory=SpendingForecast.stable)
    spending_projection: list[ForecastPoint] = field(default_factory=list)
    affordability: AffordabilityAssessment | None = None  # Only for affordability checks
    cash_flow: list[CashFlowPoint] = field(default_factory=list)
    degraded: list[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.degraded
