"""
Site Content Router

Public read endpoints for the hero carousel and static pages.
"""
from fastapi import APIRouter, Depends

from storefront.services.catalog import CatalogRepository
from .deps import get_catalog, handle_route_errors

router = APIRouter(prefix="/api", tags=["content"])


@router.get("/hero-carousel")
@handle_route_errors("Failed to fetch hero carousel slides")
async def get_hero_carousel(catalog: CatalogRepository = Depends(get_catalog)):
    return {"slides": [s.to_json() for s in catalog.get_hero_slides()]}


@router.get("/pages/{page}")
@handle_route_errors("Failed to fetch page content")
async def get_page(page: str, catalog: CatalogRepository = Depends(get_catalog)):
    return {"content": catalog.get_page(page).to_json()}
