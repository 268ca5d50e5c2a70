"""Value objects produced by the analytics services."""

from cashcast.domain.analytics.value_objects.budget_progress import BudgetProgress
from cashcast.domain.analytics.value_objects.cash_flow_point import CashFlowPoint
from cashcast.domain.analytics.value_objects.data_point import (
    DataPoint,
    TrendDirection,
)
from cashcast.domain.analytics.value_objects.detected_subscription import (
    DetectedSubscription,
)
from cashcast.domain.analytics.value_objects.financial_summary import (
    FinancialSummary,
)
from cashcast.domain.analytics.value_objects.forecast import (
    ForecastPoint,
    SpendingForecast,
    SpendingTrend,
)
from cashcast.domain.analytics.value_objects.health_metrics import (
    HealthMetrics,
    HealthStatus,
)
from cashcast.domain.analytics.value_objects.safe_spend_metrics import (
    AffordabilityAssessment,
    RiskLevel,
    SafeSpendMetrics,
)

__all__ = [
    "AffordabilityAssessment",
    "BudgetProgress",
    "CashFlowPoint",
    "DataPoint",
    "DetectedSubscription",
    "FinancialSummary",
    "ForecastPoint",
    "HealthMetrics",
    "HealthStatus",
    "RiskLevel",
    "SafeSpendMetrics",
    "SpendingForecast",
    "SpendingTrend",
    "TrendDirection",
]
