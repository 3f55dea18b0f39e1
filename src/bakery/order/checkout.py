"""Checkout — the PlaceOrder command and its handler.

The handler runs inside a unit of work: the order row and all of its item rows
are committed together, or not at all.

Lines that name a catalogue product are charged the catalogue price; a
different submitted price is logged and ignored. Lines for products the
catalogue does not know keep their submitted price.
"""

from dataclasses import dataclass, replace

import structlog
from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from bakery.domain import bakery
from bakery.order.cart import parse_cart_snapshot
from bakery.order.order import Order
from bakery.product.product import Product
from bakery.shared.money import to_decimal

logger = structlog.get_logger(__name__)


@bakery.command(part_of="Order")
class PlaceOrder:
    name = String(required=True, max_length=255)
    address = Text(required=True)
    cart_data = Text(required=True)  # JSON: list of {id, name, price, quantity}
    idempotency_key = String(max_length=128)


@dataclass(frozen=True)
class CheckoutConfirmation:
    """What the shopper is told once the order is stored."""

    order_id: str
    total: float
    item_count: int

    @classmethod
    def of(cls, order) -> "CheckoutConfirmation":
        return cls(order_id=str(order.id), total=order.total, item_count=len(order.items))


def reprice_lines(lines):
    """Replace submitted prices with catalogue prices where the product is known."""
    product_ids = {line.product_id for line in lines if line.product_id}
    catalogue_prices = {
        str(product.id): to_decimal(product.price)
        for product in current_domain.repository_for(Product).find_by_ids(product_ids)
    }

    repriced = []
    for line in lines:
        expected = catalogue_prices.get(line.product_id)
        if expected is not None and expected != line.price:
            logger.warning(
                "Cart price differs from catalogue",
                product_id=line.product_id,
                submitted_price=str(line.price),
                catalogue_price=str(expected),
            )
            line = replace(line, price=expected)
        repriced.append(line)
    return repriced


@bakery.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(Order)

        if command.idempotency_key:
            existing = repo.find_by_idempotency_key(command.idempotency_key)
            if existing is not None:
                logger.info("Duplicate checkout, returning existing order", order_id=str(existing.id))
                return CheckoutConfirmation.of(existing)

        lines = reprice_lines(parse_cart_snapshot(command.cart_data))

        order = Order.place(
            name=command.name,
            address=command.address,
            lines=lines,
            idempotency_key=command.idempotency_key,
        )
        repo.add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            item_count=len(order.items),
            total=order.total,
        )
        return CheckoutConfirmation.of(order)
