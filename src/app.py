"""Invoicing HTTP application.

Serves the identity, catalogue and ordering domains from one FastAPI app.
Commands are processed synchronously; a middleware activates the domain that
owns the requested URL prefix before the route runs.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from catalogue.domain import catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from identity.domain import identity
from ordering.domain import ordering
from protean.integrations.fastapi import register_exception_handlers
from shared.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

# PROTEAN_ENV picks the overlay from src/domain.toml before init() reads it.
DOMAINS = (identity, catalogue, ordering)
for _domain in DOMAINS:
    _domain.init()

# URL prefix -> owning domain
PREFIX_DOMAINS = (
    ("/customers", identity),
    ("/products", catalogue),
    ("/categories", catalogue),
    ("/carts", ordering),
)


def domain_for_path(path: str):
    """Return the domain serving ``path``, or None for unowned paths."""
    return next((domain for prefix, domain in PREFIX_DOMAINS if path.startswith(prefix)), None)


app = FastAPI(
    title="Invoicing API",
    description="Customers, product catalogue, shopping carts and invoices",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ValidationError -> 400, ObjectNotFoundError -> 404, InvalidStateError -> 409
register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    domain = domain_for_path(request.url.path)
    if domain is None:
        return await call_next(request)

    add_context(domain=domain.name, method=request.method, path=request.url.path)
    try:
        with domain.domain_context():
            return await call_next(request)
    finally:
        clear_context()


from catalogue.api import category_router, product_router  # noqa: E402
from identity.api import router as customer_router  # noqa: E402
from ordering.api import cart_router  # noqa: E402

for _router in (customer_router, product_router, category_router, cart_router):
    app.include_router(_router)

logger.info("app_ready", domains=[domain.name for domain in DOMAINS])


@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "domains": {domain.name: {"name": domain.name} for domain in DOMAINS},
    }
