"""Order aggregate — a placed bakery order with its line items.

Orders are written once, at checkout, and never modified afterwards. Line
items copy the product name and unit price from the submitted cart instead of
referencing the catalogue, so an order keeps its historical prices even if the
menu changes later.
"""

from datetime import UTC, datetime
from decimal import Decimal

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, Text

from bakery.domain import bakery
from bakery.order.cart import cart_total
from bakery.order.events import OrderPlaced
from bakery.shared.money import to_money


@bakery.entity(part_of="Order")
class OrderItem:
    """A line of a placed order."""

    product_name = String(required=True, max_length=255)
    product_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)

    @property
    def line_total(self) -> Decimal:
        return to_money(self.product_price) * self.quantity


@bakery.aggregate
class Order:
    name = String(required=True, max_length=255)
    address = Text(required=True)
    total = Float(required=True, min_value=0.0)
    idempotency_key = String(max_length=128)
    items = HasMany(OrderItem)
    created_at = DateTime()

    @invariant.post
    def delivery_details_must_not_be_blank(self):
        errors = {}
        if self.name is not None and not self.name.strip():
            errors["name"] = ["Name cannot be blank"]
        if self.address is not None and not self.address.strip():
            errors["address"] = ["Address cannot be blank"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def place(cls, name, address, lines, idempotency_key=None):
        """Create an order from validated cart lines.

        The total is computed here, from the same lines that become the order
        items, and is not re-derived afterwards.
        """
        total = cart_total(lines)
        order = cls(
            name=name,
            address=address,
            total=float(total),
            idempotency_key=idempotency_key,
            created_at=datetime.now(UTC),
        )

        for line in lines:
            order.add_items(
                OrderItem(
                    product_name=line.name,
                    product_price=float(line.price),
                    quantity=line.quantity,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                name=order.name,
                item_count=len(order.items),
                total=order.total,
                placed_at=order.created_at,
            )
        )
        return order

    @property
    def items_total(self) -> Decimal:
        """Total recomputed from the stored items."""
        return to_money(sum((item.line_total for item in self.items), Decimal("0")))
