"""Forecast output value objects."""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class ForecastPoint:
    """Projected value at the first day of a future month."""

    label: str  # "Jan"
    value: int
    date: dt.date
    kind: str = "projected"


class SpendingTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


@dataclass(frozen=True)
class SpendingForecast:
    """Next month's expected spending and its direction."""

    predicted_amount: Decimal
    trend: SpendingTrend

    @classmethod
    def stable(cls) -> "SpendingForecast":
        return cls(predicted_amount=Decimal("0"), trend=SpendingTrend.STABLE)
