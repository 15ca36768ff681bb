"""
Admin API Router

Catalog and site-content editing. Open unless ADMIN_API_KEY is configured
(see storefront.auth.verify_admin).
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from storefront.auth import verify_admin
from storefront.errors import ERROR_PRODUCT_NOT_FOUND, NotFoundError
from storefront.services.catalog import CatalogRepository
from .deps import get_catalog, handle_route_errors

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(verify_admin)])


# ==================== PRODUCTS ====================

@router.patch("/products/{product_id}")
@handle_route_errors("Failed to update product")
async def admin_update_product(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """Partially update a product; fields not in the payload are kept"""
    product = catalog.update_product(product_id, payload)
    if product is None:
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    return {"product": product.to_json()}


# ==================== SITE SETTINGS ====================

@router.get("/settings")
@handle_route_errors("Failed to fetch site settings")
async def admin_get_settings(catalog: CatalogRepository = Depends(get_catalog)):
    return {"settings": catalog.get_site_settings().to_json()}


@router.patch("/settings")
@handle_route_errors("Failed to update site settings")
async def admin_update_settings(
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogRepository = Depends(get_catalog),
):
    return {"settings": catalog.update_site_settings(payload).to_json()}


@router.patch("/hero-carousel")
@handle_route_errors("Failed to update hero carousel slides")
async def admin_update_hero_carousel(
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """Replace all hero slides with ``payload["slides"]``"""
    slides = catalog.replace_hero_slides(payload.get("slides"))
    return {"slides": [s.to_json() for s in slides]}


@router.patch("/pages/{page}")
@handle_route_errors("Failed to update page content")
async def admin_update_page(
    page: str,
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """Merge ``payload["content"]`` into an existing page"""
    content = catalog.update_page(page, payload.get("content") or {})
    return {"content": content.to_json()}
