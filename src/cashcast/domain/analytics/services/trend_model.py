"""Least-squares trend line over a date-indexed series."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from cashcast.domain.analytics.value_objects import DataPoint, TrendDirection

# Slope (value units per day) beyond which a series counts as trending
TREND_THRESHOLD = 0.5


class TrendModel:
    """Ordinary-least-squares line fitted on "days since the earliest date".

    Fewer than two points (or points that all share one date) give the flat
    zero model, whose predictions are always 0. Predictions never go below 0
    since the forecast quantities (spending, balances) cannot be negative.
    """

    def __init__(
        self,
        slope: float = 0.0,
        intercept: float = 0.0,
        origin: date | None = None,
    ):
        self.slope = slope
        self.intercept = intercept
        self._origin = origin

    @classmethod
    def fit(cls, data: Sequence[DataPoint]) -> TrendModel:
        n = len(data)
        if n < 2:
            return cls()

        origin = min(point.date for point in data)
        xs = [float((point.date - origin).days) for point in data]
        ys = [float(point.value) for point in data]

        sum_x = sum(xs)
        sum_y = sum(ys)
        sum_xy = sum(x * y for x, y in zip(xs, ys))
        sum_xx = sum(x * x for x in xs)

        denominator = n * sum_xx - sum_x * sum_x
        if denominator == 0:
            return cls()

        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n
        return cls(slope=slope, intercept=intercept, origin=origin)

    @property
    def is_degenerate(self) -> bool:
        return self._origin is None

    @property
    def trend(self) -> TrendDirection:
        if self.slope > TREND_THRESHOLD:
            return TrendDirection.UP
        if self.slope < -TREND_THRESHOLD:
            return TrendDirection.DOWN
        return TrendDirection.FLAT

    def predict(self, target_date: date) -> float:
        if self._origin is None:
            return 0.0
        days = (target_date - self._origin).days
        return max(0.0, self.slope * days + self.intercept)

    def __repr__(self) -> str:
        return (
            f"TrendModel(slope={self.slope:.4f}, "
            f"intercept={self.intercept:.4f}, trend={self.trend.value!r})"
        )
