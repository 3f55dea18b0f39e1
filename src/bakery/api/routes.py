"""FastAPI routes for the storefront — catalogue, checkout and orders."""

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as SchemaValidationError
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from bakery.api.schemas import (
    CheckoutRequest,
    CheckoutResponse,
    OrderItemResponse,
    OrderResponse,
    ProductResponse,
)
from bakery.config import Settings
from bakery.order.errors import PersistenceError
from bakery.order.order import Order
from bakery.order.submission import submit_checkout
from bakery.product.seeding import list_products


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# ---------------------------------------------------------------------------
# Catalogue Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def get_products(settings: Settings = Depends(get_settings)) -> list[ProductResponse]:
    return [
        ProductResponse(
            id=str(product.id),
            name=product.name,
            price=product.price,
            image=product.image,
            image_url=settings.image_url(product.image, label=product.name),
        )
        for product in list_products()
    ]


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_checkout_request(request: Request) -> CheckoutRequest:
    """Accept the checkout form either as JSON or as a posted HTML form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        data = dict(await request.form())
    else:
        try:
            data = await request.json()
        except ValueError as exc:
            raise HTTPException(status_code=422, detail="Body must be JSON or form data") from exc

    try:
        return CheckoutRequest.model_validate(data)
    except SchemaValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False, include_context=False)) from exc


@checkout_router.post(
    "",
    status_code=201,
    response_model=CheckoutResponse,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": CheckoutRequest.model_json_schema()},
                "application/x-www-form-urlencoded": {"schema": CheckoutRequest.model_json_schema()},
            },
            "required": True,
        }
    },
)
async def checkout(
    body: CheckoutRequest = Depends(read_checkout_request),
    idempotency_key: str | None = Header(default=None, max_length=128),
) -> CheckoutResponse:
    """Place an order from the submitted cart.

    The browser clears its cart once it gets a 201 back.
    """
    try:
        confirmation = submit_checkout(
            name=body.name,
            address=body.address,
            cart_data=body.cart_data,
            idempotency_key=body.idempotency_key or idempotency_key,
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=400,
            detail={"message": "Invalid checkout request", "errors": exc.messages},
        ) from exc
    except PersistenceError as exc:
        raise HTTPException(status_code=500, detail="Error processing order") from exc

    return CheckoutResponse(
        order_id=confirmation.order_id,
        total=confirmation.total,
        item_count=confirmation.item_count,
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Order not found") from exc

    return OrderResponse(
        order_id=str(order.id),
        name=order.name,
        address=order.address,
        total=order.total,
        created_at=order.created_at,
        items=[
            OrderItemResponse(
                product_name=item.product_name,
                product_price=item.product_price,
                quantity=item.quantity,
            )
            for item in order.items
        ],
    )
