"""Income/expense totals for a set of transactions."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from cashcast.domain.analytics.value_objects import FinancialSummary
from cashcast.domain.ledger import Account, Transaction
from cashcast.domain.shared.money import round_cents


class FinancialSummaryService:
    @staticmethod
    def summarize(
        account: Account,
        transactions: Iterable[Transaction],
    ) -> FinancialSummary:
        """Balance from the account, flows from the transactions."""
        income = Decimal("0")
        expense = Decimal("0")
        for transaction in transactions:
            if transaction.is_income():
                income += transaction.amount
            elif transaction.is_expense():
                expense += abs(transaction.amount)

        return FinancialSummary(
            balance=round_cents(account.balance),
            income=round_cents(income),
            expense=round_cents(expense),
            net=round_cents(income - expense),
            currency=account.currency,
        )
