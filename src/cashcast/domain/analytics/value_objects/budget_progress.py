"""Budget consumption for the current period."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cashcast.domain.ledger import Budget


@dataclass(frozen=True)
class BudgetProgress:
    """Spent/remaining figures for one budget.

    ``percentage`` is capped to 0-100 for display while ``is_over_budget``
    compares the raw amounts, so a budget can read 100% and still be over.
    """

    budget: Budget
    spent: Decimal
    remaining: Decimal  # Negative when over budget
    percentage: Decimal  # 0-100 scale
    is_over_budget: bool
    period_start: date
    period_end: date
