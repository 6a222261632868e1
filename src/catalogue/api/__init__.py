"""HTTP routers for products and categories."""

from catalogue.api.routes import category_router, product_router

__all__ = ["category_router", "product_router"]
