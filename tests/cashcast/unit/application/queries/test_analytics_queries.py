"""Unit tests for the analytics queries."""

from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from cashcast.application.queries.analytics import (
    BudgetProgressQuery,
    CashFlowForecastQuery,
    SafeSpendQuery,
    SpendingForecastQuery,
)
from cashcast.domain.analytics.value_objects import RiskLevel, SpendingTrend
from cashcast.domain.ledger import BudgetPeriod
from cashcast.domain.shared.exceptions import DataSourceError
from tests.shared.fixtures import TODAY, LedgerFactory

USER_ID = LedgerFactory.USER_ID


@pytest.fixture
def port():
    port = AsyncMock()
    port.get_account.return_value = LedgerFactory.account("500")
    port.list_transactions.return_value = []
    port.list_active_subscriptions.return_value = []
    port.list_budgets.return_value = []
    return port


class TestCashFlowForecastQuery:
    @pytest.mark.asyncio
    async def test_projects_from_account_balance(self, port):
        points = await CashFlowForecastQuery(port).execute(USER_ID, today=TODAY)

        assert len(points) == 60
        assert {p.value for p in points} == {Decimal("500.00")}
        port.list_transactions.assert_awaited_once_with(
            USER_ID,
            since=TODAY - timedelta(days=30),
        )

    @pytest.mark.asyncio
    async def test_read_errors_propagate(self, port):
        port.get_account.side_effect = DataSourceError("down")

        with pytest.raises(DataSourceError):
            await CashFlowForecastQuery(port).execute(USER_ID, today=TODAY)


class TestSafeSpendQuery:
    @pytest.mark.asyncio
    async def test_bills_and_payday_feed_the_limit(self, port):
        port.list_active_subscriptions.return_value = [
            LedgerFactory.subscription("100", date(2024, 6, 20)),
        ]
        port.list_transactions.return_value = [
            LedgerFactory.income("1200", days_ago=4),
            LedgerFactory.expense("300", days_ago=2),
        ]

        metrics = await SafeSpendQuery(port).execute(USER_ID, today=TODAY)

        # (500 - 100) / 10 days, burn 300 / 30 = 10 per day
        assert metrics.safe_daily_limit == Decimal("40.00")
        assert metrics.days_until_payday == 10
        assert metrics.risk_level == RiskLevel.LOW
        assert metrics.monthly_income == Decimal("1200.00")
        assert metrics.monthly_expenses == Decimal("300.00")
        assert metrics.total_recurring_bills == Decimal("100.00")


class TestBudgetProgressQuery:
    @pytest.mark.asyncio
    async def test_no_budgets_skips_transaction_read(self, port):
        assert await BudgetProgressQuery(port).execute(USER_ID, today=TODAY) == []

        port.list_transactions.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reads_from_earliest_window(self, port):
        port.list_budgets.return_value = [
            LedgerFactory.budget("Food", "200", start_date=date(2024, 1, 5)),
            LedgerFactory.budget(
                "Fun",
                "50",
                period=BudgetPeriod.WEEKLY,
                start_date=date(2024, 1, 1),
            ),
        ]
        port.list_transactions.return_value = [
            LedgerFactory.expense("60", days_ago=1, category="Fun"),
        ]

        progress = await BudgetProgressQuery(port).execute(USER_ID, today=TODAY)

        port.list_transactions.assert_awaited_once_with(
            USER_ID,
            since=date(2024, 6, 5),
        )
        assert [p.budget.category for p in progress] == ["Food", "Fun"]
        assert progress[1].is_over_budget

    @pytest.mark.asyncio
    async def test_category_filter(self, port):
        port.list_budgets.return_value = [
            LedgerFactory.budget("Food", "200"),
            LedgerFactory.budget("Rent", "900"),
        ]

        progress = await BudgetProgressQuery(port).execute(
            USER_ID,
            category="Rent",
            today=TODAY,
        )

        assert [p.budget.category for p in progress] == ["Rent"]


class TestSpendingForecastQuery:
    @pytest.mark.asyncio
    async def test_execute_uses_history_window(self, port):
        result = await SpendingForecastQuery(port, history_days=90).execute(
            USER_ID,
            today=TODAY,
        )

        assert result.trend == SpendingTrend.STABLE
        port.list_transactions.assert_awaited_once_with(
            USER_ID,
            since=TODAY - timedelta(days=90),
        )

    @pytest.mark.asyncio
    async def test_projection_returns_monthly_points(self, port):
        port.list_transactions.return_value = [
            LedgerFactory.expense("400", on=date(2024, 3, 3)),
            LedgerFactory.expense("500", on=date(2024, 4, 3)),
            LedgerFactory.expense("600", on=date(2024, 5, 3)),
        ]

        result = await SpendingForecastQuery(port).projection(
            USER_ID,
            months_ahead=2,
            today=TODAY,
        )

        assert [p.label for p in result.forecast] == ["Jun", "Jul"]
        assert result.forecast[0].value > 600
