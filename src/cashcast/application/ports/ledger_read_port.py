"""Ledger read port.

This is the only contract the engine needs from the external store: a few
simple filtered reads. Implementations may raise ``DataSourceError`` (or any
transport error); callers decide whether to propagate or default.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from cashcast.domain.ledger import Account, Budget, Subscription, Transaction


class LedgerReadPort(Protocol):
    """Read-only access to a user's ledger."""

    async def get_account(self, user_id: str) -> Account:
        """Current balance and currency. Missing accounts read as zero."""
        ...

    async def list_transactions(self, user_id: str, since: date) -> list[Transaction]:
        """Transactions dated on or after ``since``, oldest first."""
        ...

    async def list_active_subscriptions(self, user_id: str) -> list[Subscription]:
        ...

    async def list_budgets(self, user_id: str) -> list[Budget]:
        ...
