"""Storefront API package."""

from bakery.api.routes import checkout_router, order_router, product_router

__all__ = ["product_router", "checkout_router", "order_router"]
