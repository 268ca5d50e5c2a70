"""Safe-to-spend daily allowance."""

from __future__ import annotations

from decimal import Decimal

from cashcast.domain.analytics.value_objects import (
    AffordabilityAssessment,
    RiskLevel,
    SafeSpendMetrics,
)
from cashcast.domain.shared.money import round_cents, to_decimal

# Risk bands as multiples of the trailing average daily spend
HIGH_RISK_MULTIPLIER = Decimal("0.5")
MEDIUM_RISK_MULTIPLIER = Decimal("1.0")

# Share of the balance suggested as an emergency reserve
EMERGENCY_FUND_RATIO = Decimal("0.20")

Number = Decimal | float | int


class SafeSpendCalculator:
    """Spread what is left after committed bills over the days to payday."""

    def compute(
        self,
        current_balance: Number,
        active_subscription_total: Number,
        days_until_payday: int,
        trailing_average_daily_spend: Number,
        monthly_income: Number = 0,
        monthly_expenses: Number = 0,
    ) -> SafeSpendMetrics:
        """
        Compute the daily limit and classify how tight it is.

        A negative remainder floors the limit at 0. ``days_until_payday`` of
        0 or less means payday is today, so the whole remainder is available.
        Risk is ``high`` below half the usual daily spend, ``medium`` below
        the usual daily spend and ``low`` otherwise.
        """
        balance = to_decimal(current_balance)
        bills = to_decimal(active_subscription_total)
        average_spend = to_decimal(trailing_average_daily_spend)

        available_after_bills = balance - bills
        if days_until_payday <= 0:
            safe_daily_limit = max(Decimal("0"), available_after_bills)
        else:
            safe_daily_limit = max(
                Decimal("0"),
                available_after_bills / days_until_payday,
            )

        return SafeSpendMetrics(
            safe_daily_limit=round_cents(safe_daily_limit),
            monthly_income=round_cents(monthly_income),
            monthly_expenses=round_cents(monthly_expenses),
            emergency_fund_estimate=round_cents(
                max(Decimal("0"), balance) * EMERGENCY_FUND_RATIO,
            ),
            days_until_payday=max(0, days_until_payday),
            risk_level=self.classify_risk(safe_daily_limit, average_spend),
            total_recurring_bills=round_cents(bills),
        )

    @staticmethod
    def assess(
        metrics: SafeSpendMetrics,
        amount: Number,
        description: str = "",
    ) -> AffordabilityAssessment:
        """Check a one-off purchase against the allowance up to payday.

        With payday today the daily limit already is the whole remainder.
        """
        if metrics.days_until_payday > 0:
            spendable = metrics.safe_daily_limit * metrics.days_until_payday
        else:
            spendable = metrics.safe_daily_limit
        purchase = round_cents(amount)

        return AffordabilityAssessment(
            amount=purchase,
            description=description,
            spendable_until_payday=round_cents(spendable),
            fits=purchase <= spendable,
        )

    @staticmethod
    def classify_risk(safe_daily_limit: Decimal, average_daily_spend: Decimal) -> RiskLevel:
        if safe_daily_limit < HIGH_RISK_MULTIPLIER * average_daily_spend:
            return RiskLevel.HIGH
        if safe_daily_limit < MEDIUM_RISK_MULTIPLIER * average_daily_spend:
            return RiskLevel.MEDIUM
        return RiskLevel.LOW
