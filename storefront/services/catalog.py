"""
Catalog Repository

Authoritative in-memory store of products, categories and site content for
the lifetime of the process. Built explicitly by the application factory and
injected into routes, so tests get an isolated instance each time.

Usage:
    catalog = CatalogRepository()           # seeded with sample data
    catalog = CatalogRepository(seed=False) # empty

    product = catalog.get_product(1)
    catalog.update_product(1, {"price": 9000})
"""
from typing import Any, Dict, List, Optional, Union

from storefront.errors import (
    ERROR_CATEGORY_NOT_FOUND,
    ERROR_INVALID_PRODUCT_ID,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_SEARCH_TOO_SHORT,
    InvalidIdError,
    NotFoundError,
    SearchQueryTooShort,
)
from storefront.logging import get_logger
from storefront.models import Category, HeroSlide, PageContent, Product, SiteSettings
from storefront.services.repositories import CategoryRepository, ProductRepository, SettingsRepository
from storefront.services.seed import default_site_settings, seed_catalog

logger = get_logger(__name__)

MIN_SEARCH_LENGTH = 2


def parse_product_id(raw: Union[str, int]) -> int:
    """Parse a product id from a path segment.

    Raises InvalidIdError for anything that is not a positive integer; this
    is a client error, distinct from "no such product".
    """
    if isinstance(raw, bool):
        raise InvalidIdError(ERROR_INVALID_PRODUCT_ID)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        # isdigit() alone admits superscripts and other non-ASCII digits
        if not (text.isascii() and text.isdigit()):
            raise InvalidIdError(ERROR_INVALID_PRODUCT_ID)
        try:
            value = int(text)
        except ValueError:
            # Past the interpreter's int digit limit
            raise InvalidIdError(ERROR_INVALID_PRODUCT_ID)
    if value <= 0:
        raise InvalidIdError(ERROR_INVALID_PRODUCT_ID)
    return value


class CatalogRepository:
    """
    Facade over the product, category and settings repositories.

    Lookups that find nothing return None; the ``require_*`` variants raise
    NotFoundError instead.
    """

    def __init__(self, seed: bool = True) -> None:
        self.products = ProductRepository()
        self.categories = CategoryRepository()
        self.settings = SettingsRepository(default_site_settings())
        if seed:
            seed_catalog(self)
            logger.info(
                "Catalog seeded: %d products, %d categories",
                self.products.count(),
                self.categories.count(),
            )

    def close(self) -> None:
        """Drop all in-memory data."""
        self.products.clear()
        self.categories.clear()
        self.settings = SettingsRepository(default_site_settings())

    # ==================== PRODUCTS ====================

    def list_products(self) -> List[Product]:
        return self.products.get_all()

    def get_product(self, product_id: Union[str, int]) -> Optional[Product]:
        return self.products.get_by_id(parse_product_id(product_id))

    def require_product(self, product_id: Union[str, int]) -> Product:
        product = self.get_product(product_id)
        if product is None:
            raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
        return product

    def list_products_by_category(self, category: str) -> List[Product]:
        return self.products.get_by_category(category)

    def search_products(self, query: str) -> List[Product]:
        if not query or len(query) < MIN_SEARCH_LENGTH:
            raise SearchQueryTooShort(ERROR_SEARCH_TOO_SHORT)
        return self.products.search(query)

    def create_product(self, data: Dict[str, Any]) -> Product:
        product = self.products.create(data)
        logger.info("Created product %d", product.id)
        return product

    def update_product(self, product_id: Union[str, int], data: Dict[str, Any]) -> Optional[Product]:
        product = self.products.update(parse_product_id(product_id), data)
        if product is not None:
            logger.info("Updated product %d (%s)", product.id, ", ".join(sorted(data)) or "no fields")
        return product

    # ==================== CATEGORIES ====================

    def list_categories(self) -> List[Category]:
        return self.categories.get_all()

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self.categories.get_by_slug(slug)

    def require_category(self, slug: str) -> Category:
        category = self.get_category_by_slug(slug)
        if category is None:
            raise NotFoundError(ERROR_CATEGORY_NOT_FOUND)
        return category

    def create_category(self, data: Dict[str, Any]) -> Category:
        category = self.categories.create(data)
        logger.info("Created category %d (%s)", category.id, category.slug)
        return category

    # ==================== SITE CONTENT ====================

    def get_site_settings(self) -> SiteSettings:
        return self.settings.get()

    def update_site_settings(self, data: Dict[str, Any]) -> SiteSettings:
        return self.settings.update(data)

    def get_hero_slides(self) -> List[HeroSlide]:
        return self.settings.get_hero_slides()

    def replace_hero_slides(self, slides: Any) -> List[HeroSlide]:
        return self.settings.replace_hero_slides(slides)

    def get_page(self, page: str) -> PageContent:
        return self.settings.get_page(page)

    def update_page(self, page: str, data: Any) -> PageContent:
        return self.settings.update_page(page, data)
