"""Monthly projections from a fitted trend line."""

from __future__ import annotations

from calendar import month_abbr
from collections.abc import Iterable
from dataclasses import dataclass, field

from cashcast.domain.analytics.services.trend_model import TrendModel
from cashcast.domain.analytics.value_objects import DataPoint, ForecastPoint
from cashcast.domain.shared.money import round_whole
from cashcast.domain.shared.time import add_months, first_of_month

DEFAULT_MONTHS_AHEAD = 3


@dataclass
class ForecastResult:
    model: TrendModel | None
    forecast: list[ForecastPoint] = field(default_factory=list)


class ForecastGenerator:
    """Project a history forward month by month."""

    def generate(
        self,
        history: Iterable[DataPoint],
        months_ahead: int = DEFAULT_MONTHS_AHEAD,
    ) -> ForecastResult:
        """Fit a trend on ``history`` and predict the next months.

        History is sorted here, so callers may pass it in any order. Each
        point sits on the first day of the month ``i`` months after the last
        observation and carries the prediction rounded to a whole number.
        """
        sorted_history = sorted(history, key=lambda point: point.date)
        if not sorted_history:
            return ForecastResult(model=None, forecast=[])

        model = TrendModel.fit(sorted_history)
        last_date = sorted_history[-1].date

        forecast: list[ForecastPoint] = []
        for i in range(1, months_ahead + 1):
            next_date = first_of_month(add_months(last_date, i))
            forecast.append(
                ForecastPoint(
                    label=month_abbr[next_date.month],
                    value=round_whole(model.predict(next_date)),
                    date=next_date,
                ),
            )

        return ForecastResult(model=model, forecast=forecast)
