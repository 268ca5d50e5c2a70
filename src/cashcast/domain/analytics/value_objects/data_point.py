"""Date-indexed series values used by the trend and forecast services."""

import datetime as dt
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DataPoint:
    """Single observation in a time series."""

    date: dt.date
    value: float


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"
