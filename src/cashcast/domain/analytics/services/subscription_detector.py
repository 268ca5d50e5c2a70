"""Recurring charge detection from transaction history."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from cashcast.domain.analytics.value_objects import DetectedSubscription
from cashcast.domain.ledger import Transaction
from cashcast.domain.shared.money import round_cents

# Average gap (days) between charges that counts as a monthly cycle
MIN_CYCLE_DAYS = 25
MAX_CYCLE_DAYS = 35
MIN_OCCURRENCES = 2

_WHITESPACE = re.compile(r"\s+")


def _normalize(description: str) -> str:
    return _WHITESPACE.sub(" ", description.strip().lower())


class SubscriptionDetector:
    """Find expenses that repeat with the same payee and amount each month."""

    def detect(self, transactions: Iterable[Transaction]) -> list[DetectedSubscription]:
        groups: dict[tuple[str, Decimal], list[Transaction]] = defaultdict(list)
        for transaction in transactions:
            if not transaction.is_expense() or not transaction.description:
                continue
            key = (_normalize(transaction.description), round_cents(abs(transaction.amount)))
            groups[key].append(transaction)

        detected: list[DetectedSubscription] = []
        for (_, amount), charges in groups.items():
            charge_dates = sorted({t.date for t in charges})
            if len(charge_dates) < MIN_OCCURRENCES:
                continue

            mean_gap = self._mean_gap(charge_dates)
            if not MIN_CYCLE_DAYS <= mean_gap <= MAX_CYCLE_DAYS:
                continue

            latest = max(charges, key=lambda t: t.date)
            detected.append(
                DetectedSubscription(
                    name=latest.description or "",
                    amount=amount,
                    occurrences=len(charge_dates),
                    last_charged=charge_dates[-1],
                    next_expected=charge_dates[-1] + timedelta(days=round(mean_gap)),
                ),
            )

        detected.sort(key=lambda s: s.amount, reverse=True)
        return detected

    @staticmethod
    def _mean_gap(charge_dates: list[date]) -> float:
        gaps = [(b - a).days for a, b in zip(charge_dates, charge_dates[1:])]
        return sum(gaps) / len(gaps)
