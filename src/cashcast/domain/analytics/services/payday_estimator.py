"""Fixed-cadence payday heuristic."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from cashcast.domain.ledger import Transaction
from cashcast.domain.shared.time import today_utc

DEFAULT_CADENCE_DAYS = 14


class PaydayEstimator:
    """Assume the next payday comes one cadence after the latest deposit.

    Without any deposit, or when that date has already passed, the full
    cadence is assumed.
    """

    def __init__(self, cadence_days: int = DEFAULT_CADENCE_DAYS):
        self._cadence_days = cadence_days

    def days_until_payday(
        self,
        transactions: Iterable[Transaction],
        today: date | None = None,
    ) -> int:
        today = today or today_utc()
        income_dates = [t.date for t in transactions if t.is_income()]
        if not income_dates:
            return self._cadence_days

        next_payday = max(income_dates) + timedelta(days=self._cadence_days)
        remaining = (next_payday - today).days
        return remaining if remaining > 0 else self._cadence_days
