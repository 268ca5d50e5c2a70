"""Outlier detection on transaction amounts."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from cashcast.domain.ledger import Transaction

Z_SCORE_THRESHOLD = Decimal("2.5")
MIN_TRANSACTIONS_FOR_ANOMALY = 10


class AnomalyDetector:
    """Flag transactions whose size is far above the user's norm.

    Uses the population standard deviation of absolute amounts. Too little
    data or no variance at all yields no anomalies.
    """

    def __init__(
        self,
        z_threshold: Decimal = Z_SCORE_THRESHOLD,
        min_transactions: int = MIN_TRANSACTIONS_FOR_ANOMALY,
    ):
        self._z_threshold = z_threshold
        self._min_transactions = min_transactions

    def detect(self, transactions: Sequence[Transaction]) -> list[Transaction]:
        if len(transactions) < self._min_transactions:
            return []

        amounts = [abs(t.amount) for t in transactions]
        mean = sum(amounts, Decimal("0")) / len(amounts)
        variance = sum(((a - mean) ** 2 for a in amounts), Decimal("0")) / len(amounts)
        std_dev = variance.sqrt()
        if std_dev == 0:
            return []

        cutoff = mean + std_dev * self._z_threshold
        return [t for t in transactions if abs(t.amount) > cutoff]
