"""Trossachs storefront: catalog API and shopper cart core."""

__version__ = "0.1.0"
