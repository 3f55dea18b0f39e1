"""Catalogue seeding — fills an empty catalogue with the default cakes."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Text
from protean.utils.globals import current_domain

from bakery.domain import bakery
from bakery.product.product import Product

logger = structlog.get_logger(__name__)

DEFAULT_PRODUCTS = (
    {"name": "Chocolate Fudge Cake", "price": 25.99, "image": "chocolate_cake.jpg"},
    {"name": "Strawberry Cheesecake", "price": 28.50, "image": "strawberry_cheesecake.jpg"},
    {"name": "Red Velvet Cake", "price": 24.75, "image": "red_velvet.jpg"},
    {"name": "Vanilla Birthday Cake", "price": 22.99, "image": "vanilla_birthday.jpg"},
    {"name": "Lemon Drizzle Cake", "price": 21.50, "image": "lemon_drizzle.jpg"},
    {"name": "Carrot Cake", "price": 23.99, "image": "carrot_cake.jpg"},
)


@bakery.command(part_of="Product")
class SeedCatalogue:
    """Insert products into the catalogue if, and only if, it is empty."""

    products = Text()  # JSON: list of {name, price, image}; defaults when omitted


@bakery.command_handler(part_of=Product)
class SeedCatalogueHandler:
    @handle(SeedCatalogue)
    def seed_catalogue(self, command):
        repo = current_domain.repository_for(Product)
        if repo.count() > 0:
            logger.debug("Catalogue already populated, skipping seed")
            return 0

        if command.products:
            try:
                products_data = json.loads(command.products)
            except (json.JSONDecodeError, TypeError):
                raise ValidationError({"products": ["Seed products must be valid JSON"]}) from None
        else:
            products_data = DEFAULT_PRODUCTS

        for data in products_data:
            repo.add(Product.create(name=data["name"], price=data["price"], image=data["image"]))

        logger.info("Inserted default catalogue products", count=len(products_data))
        return len(products_data)


def list_products() -> list[Product]:
    """All catalogue products, ordered by name."""
    return current_domain.repository_for(Product).list_all()
