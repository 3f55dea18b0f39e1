"""Checkout failures that are not the client's fault."""


class PersistenceError(Exception):
    """The order store could not complete the checkout write.

    Transient and permanent failures are not distinguished. Nothing is retried;
    a client that resubmits creates a new order unless it sends an idempotency
    key.
    """
