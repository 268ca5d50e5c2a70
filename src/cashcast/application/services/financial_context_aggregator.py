"""Fan-in of every analytics component into one advisory snapshot."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date, timedelta
from decimal import Decimal
from typing import TypeVar

from cashcast.application.dtos import (
    ALL_SECTIONS,
    AffordabilityCheck,
    AnalysisRequest,
    BudgetReview,
    ContextSection,
    FinancialContext,
    SpendingReview,
    required_sections,
)
from cashcast.application.ports import LedgerReadPort
from cashcast.domain.analytics.services import (
    DEFAULT_MONTHS_AHEAD,
    AnomalyDetector,
    BudgetProgressTracker,
    CashFlowProjector,
    FinancialHealthScorer,
    FinancialSummaryService,
    ForecastGenerator,
    PaydayEstimator,
    SafeSpendCalculator,
    SpendingForecaster,
    SubscriptionDetector,
)
from cashcast.domain.ledger import Account, Budget, Subscription, Transaction
from cashcast.domain.shared.time import today_utc

logger = logging.getLogger(__name__)

T = TypeVar("T")

RECENT_DAYS = 30
DEFAULT_HISTORY_DAYS = 180

ACCOUNT = "account"
TRANSACTIONS = "transactions"
SUBSCRIPTIONS = "subscriptions"
BUDGETS = "budgets"

# Ledger reads each context section is derived from
SECTION_READS: dict[ContextSection, frozenset[str]] = {
    ContextSection.SUMMARY: frozenset({ACCOUNT, TRANSACTIONS}),
    ContextSection.TRANSACTIONS: frozenset({TRANSACTIONS}),
    ContextSection.BUDGETS: frozenset({BUDGETS, TRANSACTIONS}),
    ContextSection.SUBSCRIPTIONS: frozenset({SUBSCRIPTIONS, TRANSACTIONS}),
    ContextSection.SAFE_SPEND: frozenset({ACCOUNT, SUBSCRIPTIONS, TRANSACTIONS}),
    ContextSection.HEALTH: frozenset({ACCOUNT, TRANSACTIONS, BUDGETS}),
    ContextSection.SPENDING_FORECAST: frozenset({TRANSACTIONS}),
    ContextSection.CASH_FLOW: frozenset({ACCOUNT, TRANSACTIONS, SUBSCRIPTIONS}),
    ContextSection.ANOMALIES: frozenset({TRANSACTIONS}),
}

# Reads a section can do without: a failed one counts as "no data yet"
OPTIONAL_READS: dict[ContextSection, frozenset[str]] = {
    ContextSection.SUMMARY: frozenset({TRANSACTIONS}),
    ContextSection.SUBSCRIPTIONS: frozenset({TRANSACTIONS}),
    ContextSection.SAFE_SPEND: frozenset({TRANSACTIONS}),
    ContextSection.CASH_FLOW: frozenset({TRANSACTIONS}),
}


class FinancialContextAggregator:
    """Build the consolidated financial snapshot for one user.

    The four ledger reads run concurrently and are joined before anything is
    derived. A read or derivation that fails leaves its fields at their
    empty/zero defaults and is listed in ``FinancialContext.degraded``.
    Sections that cannot stand without a failed read keep their defaults as
    well; a failed transaction read alone is treated as an empty history for
    the balance-driven sections (summary, safe-spend, cash flow). The
    aggregator itself never raises, so advisory text can still be produced
    from whatever was available.

    The request kind selects the sections; its fields narrow them: a budget
    review's category filters the budgets, a spending review's month count
    sets the projection horizon and an affordability check is assessed
    against the safe-spend allowance.
    """

    def __init__(
        self,
        ledger_read_port: LedgerReadPort,
        history_days: int = DEFAULT_HISTORY_DAYS,
        payday_estimator: PaydayEstimator | None = None,
    ):
        self._ledger = ledger_read_port
        self._history_days = history_days
        self._payday = payday_estimator or PaydayEstimator()
        self._projector = CashFlowProjector()
        self._safe_spend = SafeSpendCalculator()
        self._budget_tracker = BudgetProgressTracker()
        self._health_scorer = FinancialHealthScorer()
        self._anomalies = AnomalyDetector()
        self._subscription_detector = SubscriptionDetector()
        self._generator = ForecastGenerator()
        self._forecaster = SpendingForecaster(self._generator)

    async def build_context(
        self,
        user_id: str,
        request: AnalysisRequest | None = None,
        today: date | None = None,
    ) -> FinancialContext:
        """Assemble the snapshot, restricted to what ``request`` needs."""
        try:
            return await self._build(user_id, request, today or today_utc())
        except Exception:
            logger.exception("Context aggregation failed for user %s", user_id)
            return FinancialContext(degraded=["context"])

    async def _build(
        self,
        user_id: str,
        request: AnalysisRequest | None,
        today: date,
    ) -> FinancialContext:
        sections = ALL_SECTIONS if request is None else required_sections(request)
        reads = frozenset().union(*(SECTION_READS[s] for s in sections))
        context = FinancialContext()
        since = today - timedelta(days=self._history_days)

        account, transactions, subscriptions, budgets = await asyncio.gather(
            self._read(
                ACCOUNT,
                reads,
                context,
                lambda: self._ledger.get_account(user_id),
                Account.empty(),
            ),
            self._read(
                TRANSACTIONS,
                reads,
                context,
                lambda: self._ledger.list_transactions(user_id, since=since),
                [],
            ),
            self._read(
                SUBSCRIPTIONS,
                reads,
                context,
                lambda: self._ledger.list_active_subscriptions(user_id),
                [],
            ),
            self._read(
                BUDGETS,
                reads,
                context,
                lambda: self._ledger.list_budgets(user_id),
                [],
            ),
        )

        self._compose(
            context,
            request,
            sections,
            account,
            transactions,
            [s for s in subscriptions if s.is_active()],
            budgets,
            today,
        )
        logger.debug(
            "Built context for user %s (sections=%d, degraded=%s)",
            user_id,
            len(sections),
            context.degraded,
        )
        return context

    async def _read(
        self,
        name: str,
        reads: frozenset[str],
        context: FinancialContext,
        fetch: Callable[[], Awaitable[T]],
        default: T,
    ) -> T:
        if name not in reads:
            return default
        try:
            return await fetch()
        except Exception as e:
            logger.warning(
                "Ledger read %r failed, using default: %s (type: %s)",
                name,
                str(e) or repr(e),
                type(e).__name__,
            )
            context.degraded.append(name)
            return default

    def _compose(
        self,
        context: FinancialContext,
        request: AnalysisRequest | None,
        sections: frozenset[ContextSection],
        account: Account,
        transactions: list[Transaction],
        subscriptions: list[Subscription],
        budgets: list[Budget],
        today: date,
    ) -> None:
        failed = frozenset(context.degraded)
        sections = frozenset(
            s
            for s in sections
            if not (SECTION_READS[s] - OPTIONAL_READS.get(s, frozenset())) & failed
        )

        recent_start = today - timedelta(days=RECENT_DAYS)
        recent = [t for t in transactions if t.date >= recent_start]

        # Safe-spend and health read income/expense off the summary
        if sections & {
            ContextSection.SUMMARY,
            ContextSection.SAFE_SPEND,
            ContextSection.HEALTH,
        }:
            context.summary = self._derive(
                context,
                ContextSection.SUMMARY,
                lambda: FinancialSummaryService.summarize(account, recent),
                context.summary,
            )

        if ContextSection.TRANSACTIONS in sections:
            context.recent_transactions = sorted(
                recent,
                key=lambda t: t.date,
                reverse=True,
            )

        if ContextSection.BUDGETS in sections or ContextSection.HEALTH in sections:
            progress = self._derive(
                context,
                ContextSection.BUDGETS,
                lambda: [
                    self._budget_tracker.progress(b, transactions, today=today)
                    for b in budgets
                ],
                [],
            )

            # Health always scores every budget, even for a one-category review
            if ContextSection.HEALTH in sections:
                context.health = self._derive(
                    context,
                    ContextSection.HEALTH,
                    lambda: self._health_scorer.score(context.summary, progress),
                    context.health,
                )

            if isinstance(request, BudgetReview) and request.category is not None:
                progress = [
                    p for p in progress if p.budget.category == request.category
                ]
            context.budgets = progress

        if ContextSection.SUBSCRIPTIONS in sections:
            context.subscriptions = subscriptions
            context.detected_subscriptions = self._derive(
                context,
                ContextSection.SUBSCRIPTIONS,
                lambda: self._subscription_detector.detect(transactions),
                [],
            )

        if ContextSection.ANOMALIES in sections:
            context.anomalies = self._derive(
                context,
                ContextSection.ANOMALIES,
                lambda: self._anomalies.detect(recent),
                [],
            )

        if ContextSection.SAFE_SPEND in sections:
            bills = sum((s.amount for s in subscriptions), Decimal("0"))
            safe_spend = self._derive(
                context,
                ContextSection.SAFE_SPEND,
                lambda: self._safe_spend.compute(
                    current_balance=account.balance,
                    active_subscription_total=bills,
                    days_until_payday=self._payday.days_until_payday(
                        transactions,
                        today,
                    ),
                    trailing_average_daily_spend=self._projector.average_daily_burn(
                        recent,
                    ),
                    monthly_income=context.summary.income,
                    monthly_expenses=context.summary.expense,
                ),
                None,
            )
            if safe_spend is not None:
                context.safe_spend = safe_spend
                if isinstance(request, AffordabilityCheck):
                    context.affordability = self._safe_spend.assess(
                        safe_spend,
                        request.amount,
                        request.description,
                    )

        if ContextSection.SPENDING_FORECAST in sections:
            context.spending_forecast = self._derive(
                context,
                ContextSection.SPENDING_FORECAST,
                lambda: self._forecaster.forecast(transactions, today=today),
                context.spending_forecast,
            )
            months_ahead = (
                request.months
                if isinstance(request, SpendingReview)
                else DEFAULT_MONTHS_AHEAD
            )
            context.spending_projection = self._derive(
                context,
                ContextSection.SPENDING_FORECAST,
                lambda: self._generator.generate(
                    SpendingForecaster.monthly_expense_series(transactions, today),
                    months_ahead=months_ahead,
                ).forecast,
                [],
            )

        if ContextSection.CASH_FLOW in sections:
            context.cash_flow = self._derive(
                context,
                ContextSection.CASH_FLOW,
                lambda: self._projector.project(
                    account.balance,
                    recent,
                    subscriptions,
                    today=today,
                ),
                [],
            )

    @staticmethod
    def _derive(
        context: FinancialContext,
        section: ContextSection,
        compute: Callable[[], T],
        default: T,
    ) -> T:
        try:
            return compute()
        except Exception:
            logger.warning(
                "Could not derive %s, using default",
                section.value,
                exc_info=True,
            )
            context.degraded.append(section.value)
            return default
