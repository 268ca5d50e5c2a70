"""Ledger records the engine reads from the external store."""

from cashcast.domain.ledger.account import Account
from cashcast.domain.ledger.budget import Budget, BudgetPeriod
from cashcast.domain.ledger.subscription import Subscription, SubscriptionStatus
from cashcast.domain.ledger.transaction import Transaction

__all__ = [
    "Account",
    "Budget",
    "BudgetPeriod",
    "Subscription",
    "SubscriptionStatus",
    "Transaction",
]
