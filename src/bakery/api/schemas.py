"""Pydantic request/response schemas for the storefront API.

These are external contracts, kept separate from the protean commands they
are translated into.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    """Checkout form as posted by the storefront.

    ``cart_data`` is the browser cart exactly as stored in session storage: a
    JSON-encoded string, not a nested list. Missing fields default to empty so
    that the domain, not the transport, reports them.
    """

    name: str = ""
    address: str = ""
    cart_data: str = Field(default="", alias="cartData")
    idempotency_key: str | None = Field(default=None, max_length=128)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Jane Doe",
                    "address": "1 Main St",
                    "cartData": '[{"id": 1, "name": "Carrot Cake", "price": 23.99, "quantity": 1}]',
                }
            ]
        },
    }


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class CheckoutResponse(BaseModel):
    order_id: str
    total: float
    item_count: int


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    image: str
    image_url: str


class OrderItemResponse(BaseModel):
    product_name: str
    product_price: float
    quantity: int


class OrderResponse(BaseModel):
    order_id: str
    name: str
    address: str
    total: float
    created_at: datetime | None = None
    items: list[OrderItemResponse]
