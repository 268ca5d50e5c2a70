"""Unit tests for BudgetProgressTracker."""

from datetime import date
from decimal import Decimal

import pytest

from cashcast.domain.analytics.services import BudgetProgressTracker
from cashcast.domain.ledger import BudgetPeriod
from tests.shared.fixtures import TODAY, LedgerFactory


@pytest.fixture
def tracker():
    return BudgetProgressTracker()


@pytest.fixture
def food_budget():
    return LedgerFactory.budget("Food", "100", start_date=date(2024, 1, 5))


class TestBudgetProgress:
    def test_partial_spend(self, tracker, food_budget):
        transactions = [
            LedgerFactory.expense("25", days_ago=1, category="Food"),
            LedgerFactory.expense("15", days_ago=2, category="Food"),
        ]

        progress = tracker.progress(food_budget, transactions, today=TODAY)

        assert progress.spent == Decimal("40.00")
        assert progress.remaining == Decimal("60.00")
        assert progress.percentage == Decimal("40.00")
        assert progress.is_over_budget is False

    def test_overspend_caps_percentage_but_flags_over(self, tracker, food_budget):
        transactions = [LedgerFactory.expense("150", days_ago=1, category="Food")]

        progress = tracker.progress(food_budget, transactions, today=TODAY)

        assert progress.percentage == Decimal("100.00")
        assert progress.is_over_budget is True
        assert progress.remaining == Decimal("-50.00")

    def test_exactly_at_limit_is_not_over(self, tracker, food_budget):
        transactions = [LedgerFactory.expense("100", days_ago=1, category="Food")]

        progress = tracker.progress(food_budget, transactions, today=TODAY)

        assert progress.percentage == Decimal("100.00")
        assert progress.is_over_budget is False

    def test_zero_limit_reports_zero_percent(self, tracker):
        budget = LedgerFactory.budget("Fun", "0")
        transactions = [LedgerFactory.expense("50", days_ago=1, category="Fun")]

        progress = tracker.progress(budget, transactions, today=TODAY)

        assert progress.percentage == Decimal("0")
        assert progress.is_over_budget is True

    def test_ignores_other_categories_income_and_out_of_window(
        self,
        tracker,
        food_budget,
    ):
        transactions = [
            LedgerFactory.expense("10", days_ago=1, category="Food"),
            LedgerFactory.expense("99", days_ago=1, category="Rent"),
            LedgerFactory.income("500", days_ago=1, category="Food"),
            # Window for 2024-06-15 starts 2024-06-05
            LedgerFactory.expense("70", on=date(2024, 6, 4), category="Food"),
        ]

        progress = tracker.progress(food_budget, transactions, today=TODAY)

        assert progress.spent == Decimal("10.00")

    def test_progress_carries_window(self, tracker, food_budget):
        progress = tracker.progress(food_budget, [], today=TODAY)

        assert progress.budget is food_budget
        assert (progress.period_start, progress.period_end) == (
            date(2024, 6, 5),
            date(2024, 7, 4),
        )


class TestPeriodWindow:
    """Inclusive windows containing ``today``."""

    @pytest.mark.parametrize(
        ("start_date", "today", "expected"),
        [
            (date(2024, 1, 5), date(2024, 6, 15), (date(2024, 6, 5), date(2024, 7, 4))),
            (date(2024, 1, 5), date(2024, 6, 3), (date(2024, 5, 5), date(2024, 6, 4))),
            (date(2024, 1, 5), date(2024, 6, 5), (date(2024, 6, 5), date(2024, 7, 4))),
            (date(2024, 1, 1), date(2024, 12, 31), (date(2024, 12, 1), date(2024, 12, 31))),
        ],
    )
    def test_monthly(self, start_date, today, expected):
        budget = LedgerFactory.budget("Food", "100", start_date=start_date)

        assert BudgetProgressTracker.period_window(budget, today) == expected

    def test_monthly_anchor_clamps_to_short_month(self):
        budget = LedgerFactory.budget("Food", "100", start_date=date(2024, 1, 31))

        window = BudgetProgressTracker.period_window(budget, date(2024, 2, 15))

        assert window == (date(2024, 1, 31), date(2024, 2, 28))

    def test_weekly_starts_on_start_weekday(self):
        # 2024-01-01 is a Monday, 2024-06-15 a Saturday
        budget = LedgerFactory.budget(
            "Food",
            "100",
            period=BudgetPeriod.WEEKLY,
            start_date=date(2024, 1, 1),
        )

        window = BudgetProgressTracker.period_window(budget, TODAY)

        assert window == (date(2024, 6, 10), date(2024, 6, 16))

    @pytest.mark.parametrize("period", [BudgetPeriod.YEARLY, BudgetPeriod.CUSTOM])
    def test_yearly_and_custom_span_one_year(self, period):
        budget = LedgerFactory.budget(
            "Travel",
            "2000",
            period=period,
            start_date=date(2024, 3, 1),
        )

        window = BudgetProgressTracker.period_window(budget, TODAY)

        assert window == (date(2024, 3, 1), date(2025, 2, 28))
