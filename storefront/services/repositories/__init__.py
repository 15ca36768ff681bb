"""
Repository Pattern for the in-memory catalog

- ProductRepository: Product catalog, search
- CategoryRepository: Category tree, slug lookup
- SettingsRepository: Site settings, hero carousel, pages
"""
from .product_repo import ProductRepository
from .category_repo import CategoryRepository
from .settings_repo import SettingsRepository

__all__ = [
    "ProductRepository",
    "CategoryRepository",
    "SettingsRepository",
]
