"""Product Repository - Product catalog operations."""
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from storefront.errors import ERROR_INVALID_PRODUCT_DATA, ValidationFailed
from storefront.models import Product, ProductCreate
from .base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """In-memory product table."""

    def get_by_category(self, category: str) -> List[Product]:
        """Products whose category equals ``category``, ignoring case."""
        wanted = category.lower()
        return [p for p in self._rows.values() if p.category.lower() == wanted]

    def search(self, query: str) -> List[Product]:
        """Search products by name, description, category or sub-category."""
        needle = query.lower()
        return [
            p for p in self._rows.values()
            if needle in p.name.lower()
            or needle in p.description.lower()
            or needle in p.category.lower()
            or (p.sub_category is not None and needle in p.sub_category.lower())
        ]

    def create(self, data: Dict[str, Any]) -> Product:
        """Validate and store a new product. The id counter only moves on success."""
        try:
            fields = ProductCreate.model_validate(data)
        except ValidationError as e:
            raise ValidationFailed.from_pydantic(ERROR_INVALID_PRODUCT_DATA, e) from e

        product = Product(id=self._next(), **fields.model_dump())
        return self._store(product.id, product)

    def update(self, product_id: int, data: Dict[str, Any]) -> Optional[Product]:
        """Shallow-merge ``data`` onto the stored product.

        Only keys present in ``data`` are overwritten. The merged record must
        still be a valid product; ``id`` cannot be changed.
        """
        existing = self._rows.get(product_id)
        if existing is None:
            return None

        merged = existing.to_json()
        merged.update(Product.normalize_keys(data))
        merged["id"] = product_id

        try:
            updated = Product.model_validate(merged)
        except ValidationError as e:
            raise ValidationFailed.from_pydantic(ERROR_INVALID_PRODUCT_DATA, e) from e

        return self._store(product_id, updated)
