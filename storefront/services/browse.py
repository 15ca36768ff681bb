"""
Catalog browsing helpers.

Pure functions over a product snapshot, used by shop and listing views to
filter, sort and curate what the catalog API returned.
"""
from typing import Iterable, List, Optional

from storefront.models import Product

SORT_OPTIONS = ("featured", "newest", "price-low", "price-high", "rating", "bestseller")

FEATURED_LIMIT = 4


def _is_all(value: Optional[str]) -> bool:
    return not value or value.lower() == "all"


def filter_by_price(products: Iterable[Product], min_price: int, max_price: int) -> List[Product]:
    return [p for p in products if min_price <= p.price <= max_price]


def filter_by_category(products: Iterable[Product], category: Optional[str]) -> List[Product]:
    if _is_all(category):
        return list(products)
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]


def filter_by_subcategory(products: Iterable[Product], sub_category: Optional[str]) -> List[Product]:
    if _is_all(sub_category):
        return list(products)
    wanted = sub_category.lower()
    return [p for p in products if p.sub_category and p.sub_category.lower() == wanted]


def sort_products(products: Iterable[Product], option: str = "featured") -> List[Product]:
    """
    Sort a product list for display. Sorts are stable.

    - featured: catalog order
    - newest: new arrivals first
    - price-low / price-high: by price
    - rating: highest rated first
    - bestseller: best sellers first
    """
    items = list(products)
    if option == "newest":
        return sorted(items, key=lambda p: not p.is_new)
    if option == "price-low":
        return sorted(items, key=lambda p: p.price)
    if option == "price-high":
        return sorted(items, key=lambda p: p.price, reverse=True)
    if option == "rating":
        return sorted(items, key=lambda p: p.rating, reverse=True)
    if option == "bestseller":
        return sorted(items, key=lambda p: not p.is_best_seller)
    if option == "featured":
        return items
    raise ValueError(f"Unknown sort option: {option}")


def featured_products(products: Iterable[Product], limit: int = FEATURED_LIMIT) -> List[Product]:
    """Best sellers for the home page."""
    return [p for p in products if p.is_best_seller][:limit]


def new_arrivals(products: Iterable[Product], limit: int = FEATURED_LIMIT) -> List[Product]:
    return [p for p in products if p.is_new][:limit]
