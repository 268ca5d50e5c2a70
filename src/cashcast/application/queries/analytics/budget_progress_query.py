"""Fetch budgets and their period transactions."""

from __future__ import annotations

from datetime import date

from cashcast.application.ports import LedgerReadPort
from cashcast.domain.analytics.services import BudgetProgressTracker
from cashcast.domain.analytics.value_objects import BudgetProgress
from cashcast.domain.shared.time import today_utc


class BudgetProgressQuery:
    """Progress of every budget for its current period."""

    def __init__(
        self,
        ledger_read_port: LedgerReadPort,
        tracker: BudgetProgressTracker | None = None,
    ):
        self._ledger = ledger_read_port
        self._tracker = tracker or BudgetProgressTracker()

    async def execute(
        self,
        user_id: str,
        category: str | None = None,
        today: date | None = None,
    ) -> list[BudgetProgress]:
        today = today or today_utc()
        budgets = await self._ledger.list_budgets(user_id)
        if category is not None:
            budgets = [b for b in budgets if b.category == category]
        if not budgets:
            return []

        # One read covering the earliest window among all budgets
        since = min(self._tracker.period_window(b, today)[0] for b in budgets)
        transactions = await self._ledger.list_transactions(user_id, since=since)

        return [self._tracker.progress(b, transactions, today=today) for b in budgets]
