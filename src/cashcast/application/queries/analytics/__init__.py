"""Analytics queries: fetch from the ledger, compute, return value objects."""

from cashcast.application.queries.analytics.budget_progress_query import (
    BudgetProgressQuery,
)
from cashcast.application.queries.analytics.cash_flow_forecast_query import (
    CashFlowForecastQuery,
)
from cashcast.application.queries.analytics.safe_spend_query import (
    SafeSpendQuery,
)
from cashcast.application.queries.analytics.spending_forecast_query import (
    SpendingForecastQuery,
)

__all__ = [
    "BudgetProgressQuery",
    "CashFlowForecastQuery",
    "SafeSpendQuery",
    "SpendingForecastQuery",
]
