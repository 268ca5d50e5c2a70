"""Next-month spending forecast from monthly expense totals."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from cashcast.domain.analytics.services.forecast_generator import ForecastGenerator
from cashcast.domain.analytics.value_objects import (
    DataPoint,
    SpendingForecast,
    SpendingTrend,
    TrendDirection,
)
from cashcast.domain.ledger import Transaction
from cashcast.domain.shared.money import round_cents
from cashcast.domain.shared.time import first_of_month, today_utc

_TREND_TO_SPENDING = {
    TrendDirection.UP: SpendingTrend.INCREASING,
    TrendDirection.DOWN: SpendingTrend.DECREASING,
    TrendDirection.FLAT: SpendingTrend.STABLE,
}


class SpendingForecaster:
    """Fit the trend of completed months' spending and project one month."""

    def __init__(self, generator: ForecastGenerator | None = None):
        self._generator = generator or ForecastGenerator()

    @staticmethod
    def monthly_expense_series(
        transactions: Iterable[Transaction],
        today: date,
    ) -> list[DataPoint]:
        """Total expenses per completed month, dated on the 1st.

        The running month is left out since its partial total would pull
        the trend down.
        """
        current_month = first_of_month(today)
        totals: dict[date, Decimal] = defaultdict(Decimal)
        for transaction in transactions:
            month = first_of_month(transaction.date)
            if transaction.is_expense() and month < current_month:
                totals[month] += abs(transaction.amount)

        return [
            DataPoint(date=month, value=float(total))
            for month, total in sorted(totals.items())
        ]

    def forecast(
        self,
        transactions: Iterable[Transaction],
        today: date | None = None,
    ) -> SpendingForecast:
        today = today or today_utc()
        history = self.monthly_expense_series(transactions, today)
        result = self._generator.generate(history, months_ahead=1)
        if result.model is None or not result.forecast:
            return SpendingForecast.stable()

        # Forecast points are whole units; the model keeps cent precision
        next_month = result.forecast[0].date
        return SpendingForecast(
            predicted_amount=round_cents(result.model.predict(next_month)),
            trend=_TREND_TO_SPENDING[result.model.trend],
        )
