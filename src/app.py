"""Sweet Treats Bakery FastAPI application.

Serves the catalogue, accepts checkouts and exposes placed orders. Every
request runs inside the bakery domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000
"""

from bakery.api.factory import create_app
from bakery.domain import bakery

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# DATABASE_URL switches the default database to PostgreSQL (see bakery.domain).
bakery.init()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
