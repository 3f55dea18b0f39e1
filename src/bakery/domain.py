"""Bakery bounded context — catalogue and checkout.

Holds the product catalogue and the orders placed against it. The shopping
cart itself lives in the browser and only reaches this domain as a snapshot
submitted at checkout.

Persistence defaults to protean's in-memory provider (see ``domain.toml``).
Setting ``DATABASE_URL`` switches the default database to PostgreSQL.
"""

import os

from protean.domain import Domain

from bakery.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
bakery = Domain(name="bakery")

if database_url := os.getenv("DATABASE_URL"):
    bakery.config["databases"]["default"] = {
        "provider": "postgresql",
        "database_uri": database_url,
    }
    logger.info("Default database set from DATABASE_URL", provider="postgresql")
