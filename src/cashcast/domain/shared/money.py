"""Rounding helpers for monetary values.

Amounts travel through the engine as unrounded ``Decimal`` values and are
rounded to cents only when an output value object is built.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENTS = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_cents(value: Decimal | float | int) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal | float | int) -> int:
    """Round to the nearest integer, half away from zero."""
    return int(to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
