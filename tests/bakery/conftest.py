import json

import pytest


@pytest.fixture(scope="session")
def _bakery_domain():
    """Initialize the bakery domain once per session."""
    from bakery.domain import bakery

    bakery.init()
    return bakery


@pytest.fixture(scope="session", autouse=True)
def setup_db(_bakery_domain):
    from bakery.utils.db import drop_db, setup_db

    setup_db(_bakery_domain)

    yield

    drop_db(_bakery_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_bakery_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _bakery_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def jane_doe_cart():
    return json.dumps(
        [
            {"id": 1, "name": "Chocolate Fudge Cake", "price": 25.99, "quantity": 2},
            {"id": 2, "name": "Carrot Cake", "price": 23.99, "quantity": 1},
        ]
    )
