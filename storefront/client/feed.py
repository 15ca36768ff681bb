"""
Catalog feed - latest product snapshot for the shopper side.

Refreshes may overlap (a slow request followed by a fast one). Each refresh
takes a sequence number when it starts; its result is applied only if no
newer refresh has started since, so a stale response never overwrites a
fresher snapshot.
"""
from typing import List, Optional

import httpx

from storefront.logging import get_logger
from storefront.models import Product

from .http import ApiError, StorefrontClient

logger = get_logger(__name__)


class CatalogFeed:
    """Holds the most recent product list fetched through a StorefrontClient."""

    def __init__(self, client: StorefrontClient) -> None:
        self.client = client
        self.products: List[Product] = []
        self.last_error: Optional[str] = None
        self.loaded = False
        self._sequence = 0
        self._applied = 0

    @property
    def is_loading(self) -> bool:
        return self._sequence > self._applied

    @property
    def failed(self) -> bool:
        return self.last_error is not None

    async def refresh(self, category: Optional[str] = None, query: Optional[str] = None) -> bool:
        """
        Fetch a new snapshot (all products, one category, or a search).

        Returns:
            True if this refresh's result was applied, False if it failed or
            was superseded by a newer refresh
        """
        self._sequence += 1
        sequence = self._sequence

        try:
            if query is not None:
                products = await self.client.search_products(query)
            elif category is not None:
                products = await self.client.list_products_by_category(category)
            else:
                products = await self.client.list_products()
        except (ApiError, httpx.HTTPError) as e:
            if sequence != self._sequence:
                logger.debug(f"Discarding failure of superseded refresh #{sequence}: {e}")
                return False
            logger.warning(f"Failed to load products: {e}")
            self._applied = sequence
            self.last_error = str(e)
            return False

        if sequence != self._sequence:
            logger.debug(f"Discarding stale refresh #{sequence} (latest is #{self._sequence})")
            return False

        self._applied = sequence
        self.products = products
        self.last_error = None
        self.loaded = True
        return True

    def get(self, product_id: int) -> Optional[Product]:
        return next((p for p in self.products if p.id == product_id), None)
