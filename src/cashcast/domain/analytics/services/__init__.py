"""Analytics domain services.

Every service here is a pure computation over its arguments: no IO, no
caching, and no exceptions for thin or empty data.
"""

from cashcast.domain.analytics.services.anomaly_detector import AnomalyDetector
from cashcast.domain.analytics.services.budget_progress_tracker import (
    BudgetProgressTracker,
)
from cashcast.domain.analytics.services.cash_flow_projector import (
    FORECAST_DAYS,
    HISTORY_DAYS,
    CashFlowProjector,
)
from cashcast.domain.analytics.services.financial_health_scorer import (
    FinancialHealthScorer,
)
from cashcast.domain.analytics.services.financial_summary_service import (
    FinancialSummaryService,
)
from cashcast.domain.analytics.services.forecast_generator import (
    DEFAULT_MONTHS_AHEAD,
    ForecastGenerator,
    ForecastResult,
)
from cashcast.domain.analytics.services.payday_estimator import PaydayEstimator
from cashcast.domain.analytics.services.safe_spend_calculator import (
    SafeSpendCalculator,
)
from cashcast.domain.analytics.services.spending_forecaster import (
    SpendingForecaster,
)
from cashcast.domain.analytics.services.subscription_detector import (
    SubscriptionDetector,
)
from cashcast.domain.analytics.services.trend_model import (
    TREND_THRESHOLD,
    TrendModel,
)

__all__ = [
    "DEFAULT_MONTHS_AHEAD",
    "AnomalyDetector",
    "BudgetProgressTracker",
    "CashFlowProjector",
    "FORECAST_DAYS",
    "FinancialHealthScorer",
    "FinancialSummaryService",
    "ForecastGenerator",
    "ForecastResult",
    "HISTORY_DAYS",
    "PaydayEstimator",
    "SafeSpendCalculator",
    "SpendingForecaster",
    "SubscriptionDetector",
    "TREND_THRESHOLD",
    "TrendModel",
]
