"""
Shared Dependencies for Routers

The catalog and settings live on ``app.state``; routes receive them through
Depends so a test app can carry its own instances.
"""
import functools

from fastapi import Request

from storefront.config import Settings
from storefront.errors import StorefrontError
from storefront.logging import get_logger
from storefront.services.catalog import CatalogRepository

logger = get_logger(__name__)


def get_catalog(request: Request) -> CatalogRepository:
    return request.app.state.catalog


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def handle_route_errors(message: str):
    """
    Turn unexpected failures inside a route into a 500 with ``message``.

    StorefrontError subclasses pass through untouched and are rendered by the
    app-level exception handler.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except StorefrontError:
                raise
            except Exception as e:
                logger.error(f"{message}: {type(e).__name__}", exc_info=True)
                raise StorefrontError(message) from e
        return wrapper
    return decorator
