"""Fetch ledger data and compute the safe-to-spend allowance."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from cashcast.application.ports import LedgerReadPort
from cashcast.domain.analytics.services import (
    CashFlowProjector,
    FinancialSummaryService,
    PaydayEstimator,
    SafeSpendCalculator,
)
from cashcast.domain.analytics.value_objects import SafeSpendMetrics
from cashcast.domain.shared.time import today_utc

TRAILING_WINDOW_DAYS = 30


class SafeSpendQuery:
    """Daily allowance from balance, active bills and days to payday."""

    def __init__(
        self,
        ledger_read_port: LedgerReadPort,
        calculator: SafeSpendCalculator | None = None,
        payday_estimator: PaydayEstimator | None = None,
    ):
        self._ledger = ledger_read_port
        self._calculator = calculator or SafeSpendCalculator()
        self._payday = payday_estimator or PaydayEstimator()

    async def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> SafeSpendMetrics:
        today = today or today_utc()
        account = await self._ledger.get_account(user_id)
        subscriptions = await self._ledger.list_active_subscriptions(user_id)
        transactions = await self._ledger.list_transactions(
            user_id,
            since=today - timedelta(days=TRAILING_WINDOW_DAYS),
        )

        bills = sum((s.amount for s in subscriptions if s.is_active()), Decimal("0"))
        summary = FinancialSummaryService.summarize(account, transactions)

        return self._calculator.compute(
            current_balance=account.balance,
            active_subscription_total=bills,
            days_until_payday=self._payday.days_until_payday(transactions, today),
            trailing_average_daily_spend=CashFlowProjector.average_daily_burn(
                transactions,
            ),
            monthly_income=summary.income,
            monthly_expenses=summary.expense,
        )
