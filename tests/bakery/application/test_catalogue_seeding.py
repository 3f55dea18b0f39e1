"""Application tests for catalogue seeding and listing."""

import json

import pytest
from bakery.product.product import Product
from bakery.product.seeding import DEFAULT_PRODUCTS, SeedCatalogue, list_products
from protean import current_domain
from protean.exceptions import ValidationError


def _seed(**kwargs):
    return current_domain.process(SeedCatalogue(**kwargs), asynchronous=False)


class TestSeedCatalogue:
    def test_seeds_empty_catalogue(self):
        assert _seed() == len(DEFAULT_PRODUCTS)
        assert current_domain.repository_for(Product).count() == 6

    def test_second_seed_inserts_nothing(self):
        _seed()
        assert _seed() == 0
        assert current_domain.repository_for(Product).count() == 6

    def test_populated_catalogue_untouched(self):
        current_domain.repository_for(Product).add(
            Product.create(name="House Special", price=30.0, image="special.jpg")
        )

        assert _seed() == 0
        assert [p.name for p in list_products()] == ["House Special"]

    def test_seeded_prices(self):
        _seed()
        prices = {p.name: p.price for p in list_products()}

        assert prices["Chocolate Fudge Cake"] == 25.99
        assert prices["Strawberry Cheesecake"] == 28.50
        assert prices["Carrot Cake"] == 23.99

    def test_custom_products(self):
        products = json.dumps([{"name": "Scone", "price": 3.5, "image": "scone.jpg"}])
        assert _seed(products=products) == 1
        assert [p.name for p in list_products()] == ["Scone"]

    def test_custom_products_must_be_json(self):
        with pytest.raises(ValidationError):
            _seed(products="scone")
        assert current_domain.repository_for(Product).count() == 0


class TestListProducts:
    def test_ordered_by_name(self):
        _seed()
        names = [p.name for p in list_products()]
        assert names == sorted(names)

    def test_empty_catalogue(self):
        assert list_products() == []
