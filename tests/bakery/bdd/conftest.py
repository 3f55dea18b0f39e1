"""Shared BDD fixtures and step definitions for the bakery storefront."""

import pytest
from bakery.order.order import Order
from bakery.product.product import Product
from protean import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def cart():
    """Cart under construction; ``snapshot`` overrides ``lines`` when set."""
    return {"lines": [], "snapshot": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty order book")
def empty_order_book():
    assert current_domain.repository_for(Order).count() == 0


@given("an empty catalogue")
def empty_catalogue():
    assert current_domain.repository_for(Product).count() == 0


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("{count:d} order is stored"))
@then(parsers.cfparse("{count:d} orders are stored"))
def orders_stored(count):
    assert current_domain.repository_for(Order).count() == count


@then(parsers.cfparse('the checkout is rejected on "{field}"'))
def checkout_rejected(error, field):
    assert error["exc"] is not None
    assert field in error["exc"].messages
