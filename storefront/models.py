"""Catalog Models - Pydantic models for all entities.

Attributes are snake_case in Python; the JSON wire format is camelCase
(``imageUrl``, ``isBestSeller``...). Dump with ``by_alias=True``.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> Dict[str, Any]:
        """Dump using wire names (camelCase, JSON-safe values)."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def normalize_keys(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Map snake_case keys in ``data`` onto their camelCase aliases."""
        aliases = {name: f.alias or name for name, f in cls.model_fields.items()}
        return {aliases.get(key, key): value for key, value in data.items()}


# ==================== CATALOG ====================

class ProductCreate(CamelModel):
    """Product fields accepted on creation (everything but ``id``)."""
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: int = Field(ge=0, strict=True)  # whole Naira
    old_price: Optional[int] = Field(default=None, ge=0, strict=True)
    image_url: str
    category: str = Field(min_length=1)
    sub_category: Optional[str] = None
    is_new: bool = False
    is_best_seller: bool = False
    rating: float = Field(default=0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)


class Product(ProductCreate):
    """Product model."""
    id: int = Field(gt=0)


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1, pattern=r"^[A-Za-z0-9][A-Za-z0-9_-]*$")
    image_url: Optional[str] = None
    parent_id: Optional[int] = None


class Category(CategoryCreate):
    """Category model. ``parent_id`` is a weak reference to another category."""
    id: int = Field(gt=0)


# ==================== SITE CONTENT ====================

class Logo(CamelModel):
    text: str
    image_url: Optional[str] = None


class SocialLinks(CamelModel):
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None


class Footer(CamelModel):
    company_name: str
    address: str
    phone: str
    email: str
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    copyright: str


class HeroSlide(CamelModel):
    id: int
    image_url: str
    title: str
    subtitle: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None


class PageContent(CamelModel):
    title: str
    content: str  # HTML blob
    meta_description: Optional[str] = None
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SiteSettings(CamelModel):
    """Marketing content aggregate; one instance, updated in place."""
    logo: Logo
    footer: Footer
    hero_carousel: List[HeroSlide] = Field(default_factory=list)
    pages: Dict[str, PageContent] = Field(default_factory=dict)
