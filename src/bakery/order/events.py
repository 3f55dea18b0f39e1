"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bakery.domain import bakery


@bakery.event(part_of="Order")
class OrderPlaced:
    """A customer completed checkout and the order was recorded."""

    __version__ = 1

    order_id = Identifier(required=True)
    name = String(required=True)
    item_count = Integer(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)
