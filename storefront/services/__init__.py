"""Catalog services: repository facade, seed data, browsing helpers."""
from .catalog import CatalogRepository, parse_product_id

__all__ = [
    "CatalogRepository",
    "parse_product_id",
]
