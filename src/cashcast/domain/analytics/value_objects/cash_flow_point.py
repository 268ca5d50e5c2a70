"""Cash-flow chart point."""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CashFlowPoint:
    """Balance for one day, either reconstructed (actual) or projected."""

    date: dt.date
    value: Decimal
    is_forecast: bool
