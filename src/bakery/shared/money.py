"""Decimal helpers for currency amounts.

Prices are stored as floats and carried as exact ``Decimal`` values; only
totals are rounded to cents, so that 25.99 * 2 + 23.99 is exactly 75.97.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert a price to an exact ``Decimal`` without rounding.

    Floats go through ``str`` first so the shortest repr is used rather than
    the binary expansion (``Decimal(25.99)`` is not ``Decimal("25.99")``).
    """
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Not a monetary amount: {value!r}") from None


def to_money(value) -> Decimal:
    """Convert an amount to a cent-rounded ``Decimal``."""
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
