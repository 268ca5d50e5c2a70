"""Budget consumption over the budget's current period."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from cashcast.domain.analytics.value_objects import BudgetProgress
from cashcast.domain.ledger import Budget, BudgetPeriod, Transaction
from cashcast.domain.shared.money import round_cents
from cashcast.domain.shared.time import add_months, days_in_month, today_utc

HUNDRED = Decimal("100")


def _anchored_day(year: int, month: int, anchor_day: int) -> date:
    return date(year, month, min(anchor_day, days_in_month(year, month)))


class BudgetProgressTracker:
    """Compute spent, remaining and percentage for a budget."""

    def progress(
        self,
        budget: Budget,
        transactions: Iterable[Transaction],
        today: date | None = None,
    ) -> BudgetProgress:
        today = today or today_utc()
        period_start, period_end = self.period_window(budget, today)

        spent = sum(
            (
                abs(t.amount)
                for t in transactions
                if t.is_expense()
                and t.category == budget.category
                and period_start <= t.date <= period_end
            ),
            Decimal("0"),
        )

        if budget.amount == 0:
            percentage = Decimal("0")
        else:
            percentage = min(HUNDRED, max(Decimal("0"), spent / budget.amount * HUNDRED))

        return BudgetProgress(
            budget=budget,
            spent=round_cents(spent),
            remaining=round_cents(budget.amount - spent),
            percentage=round_cents(percentage),
            is_over_budget=spent > budget.amount,
            period_start=period_start,
            period_end=period_end,
        )

    @staticmethod
    def period_window(budget: Budget, today: date) -> tuple[date, date]:
        """Inclusive start/end dates of the period containing ``today``.

        - monthly: from this month's occurrence of ``start_date.day`` (the
          previous month's if that day is still ahead) up to the day before
          the next occurrence; days past a short month's end clamp to it
        - weekly: from the latest occurrence of ``start_date``'s weekday,
          seven days
        - yearly/custom: one year from ``start_date``
        """
        start_date = budget.start_date

        if budget.period == BudgetPeriod.MONTHLY:
            anchor = start_date.day
            start = _anchored_day(today.year, today.month, anchor)
            if start > today:
                previous = add_months(today.replace(day=1), -1)
                start = _anchored_day(previous.year, previous.month, anchor)
            following = add_months(start.replace(day=1), 1)
            end = _anchored_day(following.year, following.month, anchor) - timedelta(
                days=1,
            )
            return start, end

        if budget.period == BudgetPeriod.WEEKLY:
            offset = (today.weekday() - start_date.weekday()) % 7
            start = today - timedelta(days=offset)
            return start, start + timedelta(days=6)

        return start_date, add_months(start_date, 12) - timedelta(days=1)
