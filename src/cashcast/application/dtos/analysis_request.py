"""Closed set of advisory analysis kinds.

Each kind carries only the fields it needs, and ``required_sections`` maps it
to the parts of the financial context the advisory layer will read. Adding a
kind without extending ``required_sections`` fails loudly instead of falling
through to a default.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union


class ContextSection(str, Enum):
    SUMMARY = "summary"
    TRANSACTIONS = "transactions"
    BUDGETS = "budgets"
    SUBSCRIPTIONS = "subscriptions"
    SAFE_SPEND = "safe_spend"
    HEALTH = "health"
    SPENDING_FORECAST = "spending_forecast"
    CASH_FLOW = "cash_flow"
    ANOMALIES = "anomalies"


ALL_SECTIONS = frozenset(ContextSection)


@dataclass(frozen=True)
class SpendingReview:
    """Where the money went and where spending is heading."""

    months: int = 3


@dataclass(frozen=True)
class BudgetReview:
    """How budgets are holding up, optionally for one category."""

    category: str | None = None


@dataclass(frozen=True)
class AffordabilityCheck:
    """Whether a planned purchase fits before the next payday."""

    amount: Decimal
    description: str = ""


@dataclass(frozen=True)
class AuditReview:
    """Look for unusual charges and forgotten subscriptions."""


@dataclass(frozen=True)
class GeneralAdvice:
    """Open question; needs the whole picture."""


AnalysisRequest = Union[
    SpendingReview,
    BudgetReview,
    AffordabilityCheck,
    AuditReview,
    GeneralAdvice,
]


def required_sections(request: AnalysisRequest) -> frozenset[ContextSection]:
    if isinstance(request, SpendingReview):
        return frozenset(
            {
                ContextSection.SUMMARY,
                ContextSection.TRANSACTIONS,
                ContextSection.SPENDING_FORECAST,
                ContextSection.ANOMALIES,
            },
        )
    if isinstance(request, BudgetReview):
        return frozenset(
            {
                ContextSection.SUMMARY,
                ContextSection.BUDGETS,
                ContextSection.HEALTH,
            },
        )
    if isinstance(request, AffordabilityCheck):
        return frozenset(
            {
                ContextSection.SUMMARY,
                ContextSection.SUBSCRIPTIONS,
                ContextSection.SAFE_SPEND,
                ContextSection.CASH_FLOW,
            },
        )
    if isinstance(request, AuditReview):
        return frozenset(
            {
                ContextSection.TRANSACTIONS,
                ContextSection.SUBSCRIPTIONS,
                ContextSection.ANOMALIES,
            },
        )
    if isinstance(request, GeneralAdvice):
        return ALL_SECTIONS

    msg = f"Unknown analysis request: {type(request).__name__}"
    raise TypeError(msg)
