"""Cart snapshots submitted at checkout.

The cart is kept by the browser as a JSON list of
``{"id", "name", "price", "quantity"}`` objects and posted verbatim with the
checkout form. This module turns that text into ``CartLine`` values and
rejects anything that is not a well-formed list of lines.
"""

import json
import math
from dataclasses import dataclass
from decimal import Decimal

from protean.exceptions import ValidationError

from bakery.shared.money import to_decimal, to_money


@dataclass(frozen=True)
class CartLine:
    """One line of a submitted cart. ``product_id`` is whatever the client sent."""

    product_id: str | None
    name: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


def _invalid(message):
    return ValidationError({"cart_data": [message]})


def _is_number(value) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value)


def _parse_line(position, raw) -> CartLine:
    if not isinstance(raw, dict):
        raise _invalid(f"Line {position} must be an object")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise _invalid(f"Line {position} must have a product name")

    price = raw.get("price")
    if not _is_number(price) or price < 0:
        raise _invalid(f"Line {position} must have a non-negative price")

    quantity = raw.get("quantity")
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
        raise _invalid(f"Line {position} must have a quantity of at least 1")

    product_id = raw.get("id")
    return CartLine(
        product_id=None if product_id is None else str(product_id),
        name=name,
        price=to_decimal(price),
        quantity=quantity,
    )


def parse_cart_snapshot(cart_data) -> list[CartLine]:
    """Parse the JSON text of a cart snapshot into cart lines.

    Raises ``ValidationError`` for malformed JSON, a value that is not a list,
    malformed lines, or an empty cart.
    """
    try:
        raw_lines = json.loads(cart_data)
    except (json.JSONDecodeError, TypeError):
        raise _invalid("Invalid cart data") from None

    if not isinstance(raw_lines, list):
        raise _invalid("Cart data must be a list of items")
    if not raw_lines:
        raise _invalid("Cart is empty")

    return [_parse_line(position, raw) for position, raw in enumerate(raw_lines, start=1)]


def cart_total(lines) -> Decimal:
    """Exact sum of ``price * quantity`` over the lines, in cents."""
    return to_money(sum((line.line_total for line in lines), Decimal("0")))
