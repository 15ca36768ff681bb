"""
Categories API Router
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from storefront.services.catalog import CatalogRepository
from .deps import get_catalog, handle_route_errors

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
@handle_route_errors("Failed to fetch categories")
async def get_categories(catalog: CatalogRepository = Depends(get_catalog)):
    return {"categories": [c.to_json() for c in catalog.list_categories()]}


@router.get("/{slug}")
@handle_route_errors("Failed to fetch category")
async def get_category(slug: str, catalog: CatalogRepository = Depends(get_catalog)):
    """Get category by slug (case-insensitive)"""
    return {"category": catalog.require_category(slug).to_json()}


@router.post("", status_code=201)
@handle_route_errors("Failed to create category")
async def create_category(
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """Create a category; duplicate name or slug is a 409"""
    category = catalog.create_category(payload)
    return {"category": category.to_json()}
