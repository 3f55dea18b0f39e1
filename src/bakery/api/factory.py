"""FastAPI application factory for the storefront.

``create_app`` wires settings, CORS, the per-request domain context and the
routers. It expects the bakery domain to be initialized already; ``src/app.py``
does that before building the served app.
"""

from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from protean.utils.globals import current_domain

from bakery.api.routes import checkout_router, order_router, product_router
from bakery.config import Settings
from bakery.domain import bakery
from bakery.product.seeding import SeedCatalogue
from bakery.utils.db import setup_db
from bakery.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "Starting Sweet Treats Bakery",
        port=settings.port,
        object_storage=settings.s3_bucket or "Not configured",
    )

    setup_db(bakery)
    if settings.seed_catalogue:
        with bakery.domain_context():
            current_domain.process(SeedCatalogue(), asynchronous=False)

    yield

    logger.info("Shutting down Sweet Treats Bakery")


def create_app(settings: Settings | None = None) -> FastAPI:
    app = FastAPI(
        title="Sweet Treats Bakery",
        description="Bakery storefront: catalogue, checkout and orders",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings.from_env()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the bakery domain context for each request."""
        request_id = str(uuid4())
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            with bakery.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(product_router)
    app.include_router(checkout_router)
    app.include_router(order_router)
    return app
