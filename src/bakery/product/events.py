"""Domain events for the Product aggregate."""

from protean.fields import Float, Identifier, String

from bakery.domain import bakery


@bakery.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    image = String(required=True)
