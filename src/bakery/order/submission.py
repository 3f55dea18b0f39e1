"""Checkout submission — runs PlaceOrder and classifies failures.

``submit_checkout`` is what the HTTP layer calls. Client mistakes come back as
protean's ``ValidationError``; anything else that goes wrong while placing the
order is raised as ``PersistenceError``. Logs carry the payload's size and
shape, never the customer's name, address or cart contents.
"""

import structlog
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from bakery.order.checkout import CheckoutConfirmation, PlaceOrder
from bakery.order.errors import PersistenceError

logger = structlog.get_logger(__name__)

__all__ = ["CheckoutConfirmation", "submit_checkout"]


def submit_checkout(name, address, cart_data, idempotency_key=None) -> CheckoutConfirmation:
    log = logger.bind(
        cart_bytes=len(cart_data) if isinstance(cart_data, str) else None,
        has_idempotency_key=bool(idempotency_key),
    )

    try:
        command = PlaceOrder(
            name=name,
            address=address,
            cart_data=cart_data,
            idempotency_key=idempotency_key,
        )
        return current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        log.warning("Checkout rejected", invalid_fields=sorted(exc.messages))
        raise
    except Exception as exc:
        log.exception("Error processing order")
        raise PersistenceError("Order could not be saved") from exc
