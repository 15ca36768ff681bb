"""Category Repository - category tree operations."""
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from storefront.errors import (
    ERROR_DUPLICATE_CATEGORY,
    ERROR_INVALID_CATEGORY_DATA,
    ConflictError,
    ValidationFailed,
)
from storefront.models import Category, CategoryCreate
from .base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """In-memory category table. Names and slugs are unique, ignoring case."""

    def get_by_slug(self, slug: str) -> Optional[Category]:
        wanted = slug.lower()
        return next((c for c in self._rows.values() if c.slug.lower() == wanted), None)

    def get_children(self, parent_id: int) -> List[Category]:
        return [c for c in self._rows.values() if c.parent_id == parent_id]

    def get_top_level(self) -> List[Category]:
        return [c for c in self._rows.values() if c.parent_id is None]

    def create(self, data: Dict[str, Any]) -> Category:
        try:
            fields = CategoryCreate.model_validate(data)
        except ValidationError as e:
            raise ValidationFailed.from_pydantic(ERROR_INVALID_CATEGORY_DATA, e) from e

        name, slug = fields.name.lower(), fields.slug.lower()
        if any(c.name.lower() == name or c.slug.lower() == slug for c in self._rows.values()):
            raise ConflictError(ERROR_DUPLICATE_CATEGORY)

        category = Category(id=self._next(), **fields.model_dump())
        return self._store(category.id, category)
