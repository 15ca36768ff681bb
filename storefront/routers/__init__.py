"""API routers."""
from .admin import router as admin_router
from .categories import router as categories_router
from .content import router as content_router
from .products import router as products_router

__all__ = [
    "admin_router",
    "categories_router",
    "content_router",
    "products_router",
]
