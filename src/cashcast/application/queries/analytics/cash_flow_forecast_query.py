"""Fetch ledger data and build the 60-day cash-flow line."""

from __future__ import annotations

from datetime import date, timedelta

from cashcast.application.ports import LedgerReadPort
from cashcast.domain.analytics.services import HISTORY_DAYS, CashFlowProjector
from cashcast.domain.analytics.value_objects import CashFlowPoint
from cashcast.domain.shared.time import today_utc


class CashFlowForecastQuery:
    """Return 30 reconstructed and 30 projected daily balances."""

    def __init__(
        self,
        ledger_read_port: LedgerReadPort,
        projector: CashFlowProjector | None = None,
    ):
        self._ledger = ledger_read_port
        self._projector = projector or CashFlowProjector()

    async def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> list[CashFlowPoint]:
        today = today or today_utc()
        account = await self._ledger.get_account(user_id)
        transactions = await self._ledger.list_transactions(
            user_id,
            since=today - timedelta(days=HISTORY_DAYS),
        )
        subscriptions = await self._ledger.list_active_subscriptions(user_id)

        return self._projector.project(
            account.balance,
            transactions,
            subscriptions,
            today=today,
        )
