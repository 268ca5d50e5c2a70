"""Spending trend and projections from monthly expense history."""

from __future__ import annotations

from datetime import date, timedelta

from cashcast.application.ports import LedgerReadPort
from cashcast.domain.analytics.services import (
    ForecastGenerator,
    ForecastResult,
    SpendingForecaster,
)
from cashcast.domain.analytics.value_objects import SpendingForecast
from cashcast.domain.shared.time import today_utc

DEFAULT_HISTORY_DAYS = 180


class SpendingForecastQuery:
    """Next month's spending plus a multi-month chart projection."""

    def __init__(
        self,
        ledger_read_port: LedgerReadPort,
        history_days: int = DEFAULT_HISTORY_DAYS,
        generator: ForecastGenerator | None = None,
    ):
        self._ledger = ledger_read_port
        self._history_days = history_days
        self._generator = generator or ForecastGenerator()
        self._forecaster = SpendingForecaster(self._generator)

    async def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> SpendingForecast:
        today = today or today_utc()
        transactions = await self._ledger.list_transactions(
            user_id,
            since=today - timedelta(days=self._history_days),
        )
        return self._forecaster.forecast(transactions, today=today)

    async def projection(
        self,
        user_id: str,
        months_ahead: int = 3,
        today: date | None = None,
    ) -> ForecastResult:
        today = today or today_utc()
        transactions = await self._ledger.list_transactions(
            user_id,
            since=today - timedelta(days=self._history_days),
        )
        history = SpendingForecaster.monthly_expense_series(transactions, today)
        return self._generator.generate(history, months_ahead=months_ahead)
