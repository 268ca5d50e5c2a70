"""Thirty days of reconstructed history plus thirty days of projection."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal

from cashcast.domain.analytics.value_objects import CashFlowPoint
from cashcast.domain.ledger import Subscription, Transaction
from cashcast.domain.shared.money import round_cents, to_decimal
from cashcast.domain.shared.time import today_utc

logger = logging.getLogger(__name__)

HISTORY_DAYS = 30
FORECAST_DAYS = 30
BURN_WINDOW_DAYS = 30


class CashFlowProjector:
    """Build the balance line shown on the cash-flow chart.

    History is walked backwards from the known current balance rather than
    summed forwards from the transaction log, so the line always ends at the
    balance the ledger reports even if the log is incomplete.

    The forward half subtracts the average daily burn every day and each
    active subscription on the day whose day-of-month matches its
    ``next_billing_date``. Bills due on a day the month lacks (the 31st of a
    30-day month) are not charged that month.
    """

    def project(
        self,
        current_balance: Decimal | float | int,
        transactions: Iterable[Transaction],
        subscriptions: Iterable[Subscription],
        today: date | None = None,
    ) -> list[CashFlowPoint]:
        today = today or today_utc()
        balance = to_decimal(current_balance)
        transactions = list(transactions)

        history = self._reconstruct_history(balance, transactions, today)
        burn = self.average_daily_burn(transactions)
        forecast = self._project_forward(balance, burn, list(subscriptions), today)

        logger.debug(
            "Projected cash flow from balance %s (burn %s/day, %d transactions)",
            balance,
            burn,
            len(transactions),
        )
        return history + forecast

    @staticmethod
    def average_daily_burn(transactions: Iterable[Transaction]) -> Decimal:
        """Mean daily outflow: |sum of expenses| spread over the window."""
        spent = sum(
            (t.amount for t in transactions if t.is_expense()),
            Decimal("0"),
        )
        return abs(spent) / BURN_WINDOW_DAYS

    def _reconstruct_history(
        self,
        current_balance: Decimal,
        transactions: Sequence[Transaction],
        today: date,
    ) -> list[CashFlowPoint]:
        daily_delta: dict[date, Decimal] = defaultdict(Decimal)
        for transaction in transactions:
            daily_delta[transaction.date] += transaction.amount

        points: list[CashFlowPoint] = []
        running = current_balance
        day = today
        for _ in range(HISTORY_DAYS):
            # balance(d) = balance(d + 1) - net(d + 1)
            running -= daily_delta.get(day, Decimal("0"))
            day -= timedelta(days=1)
            points.append(
                CashFlowPoint(date=day, value=round_cents(running), is_forecast=False),
            )

        points.reverse()
        return points

    def _project_forward(
        self,
        current_balance: Decimal,
        avg_daily_burn: Decimal,
        subscriptions: Sequence[Subscription],
        today: date,
    ) -> list[CashFlowPoint]:
        active = [s for s in subscriptions if s.is_active()]

        points: list[CashFlowPoint] = []
        running = current_balance
        for offset in range(1, FORECAST_DAYS + 1):
            day = today + timedelta(days=offset)
            running -= avg_daily_burn
            for subscription in active:
                if subscription.next_billing_date.day == day.day:
                    running -= subscription.amount
            points.append(
                CashFlowPoint(date=day, value=round_cents(running), is_forecast=True),
            )

        return points
