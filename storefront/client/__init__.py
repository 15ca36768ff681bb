"""Shopper-side access to the storefront API."""
from .feed import CatalogFeed
from .http import ApiError, StorefrontClient

__all__ = ["ApiError", "CatalogFeed", "StorefrontClient"]
