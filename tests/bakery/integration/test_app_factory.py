"""Integration tests for the assembled application: startup seeding and middleware."""

import pytest
from bakery.api.factory import create_app
from bakery.config import Settings
from bakery.order.order import Order
from bakery.product.product import Product
from fastapi.testclient import TestClient
from protean import current_domain


@pytest.fixture()
def seeded_client():
    with TestClient(create_app(Settings(seed_catalogue=True))) as client:
        yield client


class TestStartup:
    def test_catalogue_seeded_on_startup(self, seeded_client):
        products = seeded_client.get("/products").json()

        assert len(products) == 6
        assert current_domain.repository_for(Product).count() == 6

    def test_seeding_can_be_switched_off(self):
        with TestClient(create_app(Settings(seed_catalogue=False))) as client:
            assert client.get("/products").json() == []

        assert current_domain.repository_for(Product).count() == 0

    def test_settings_stored_on_app(self):
        settings = Settings(s3_bucket="treats", s3_region="us-east-1", seed_catalogue=False)
        app = create_app(settings)
        assert app.state.settings is settings


class TestRequestHandling:
    def test_checkout_through_full_app(self, seeded_client, jane_doe_cart):
        response = seeded_client.post(
            "/checkout",
            json={"name": "Jane Doe", "address": "1 Main St", "cartData": jane_doe_cart},
        )

        assert response.status_code == 201
        order = current_domain.repository_for(Order).get(response.json()["order_id"])
        assert order.total == 75.97

    def test_each_response_carries_a_request_id(self, seeded_client):
        first = seeded_client.get("/products")
        second = seeded_client.get("/products")

        assert first.headers["X-Request-ID"]
        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]

    def test_cors_headers(self, seeded_client):
        response = seeded_client.get("/products", headers={"Origin": "https://shop.example"})
        assert response.headers["access-control-allow-origin"] in ("*", "https://shop.example")
