"""Application services."""

from cashcast.application.services.financial_context_aggregator import (
    FinancialContextAggregator,
)

__all__ = ["FinancialContextAggregator"]
