"""Unit tests for AnomalyDetector."""

from decimal import Decimal

from cashcast.domain.analytics.services import AnomalyDetector
from tests.shared.fixtures import LedgerFactory


class TestAnomalyDetector:
    def test_too_few_transactions(self):
        transactions = [LedgerFactory.expense("10", days_ago=i) for i in range(8)]
        transactions.append(LedgerFactory.expense("5000", days_ago=1))

        assert AnomalyDetector().detect(transactions) == []

    def test_spike_is_flagged(self):
        transactions = [LedgerFactory.expense("10", days_ago=i) for i in range(10)]
        spike = LedgerFactory.expense("500", days_ago=2, description="TV")

        anomalies = AnomalyDetector().detect([*transactions, spike])

        assert anomalies == [spike]

    def test_identical_amounts_have_no_variance(self):
        transactions = [LedgerFactory.expense("10", days_ago=i) for i in range(12)]

        assert AnomalyDetector().detect(transactions) == []

    def test_uses_absolute_amounts(self):
        transactions = [LedgerFactory.expense("10", days_ago=i) for i in range(10)]
        salary = LedgerFactory.income("500", days_ago=1)

        assert AnomalyDetector().detect([*transactions, salary]) == [salary]

    def test_custom_threshold(self):
        transactions = [LedgerFactory.expense("10", days_ago=i) for i in range(3)]
        transactions.append(LedgerFactory.expense("40", days_ago=1))

        detector = AnomalyDetector(z_threshold=Decimal("1.5"), min_transactions=4)

        assert detector.detect(transactions) == [transactions[-1]]
