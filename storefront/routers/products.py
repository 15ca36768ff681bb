"""
Products API Router

Public endpoints for the product catalog.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.services.catalog import CatalogRepository
from .deps import get_catalog, handle_route_errors

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


@router.get("/api/products")
@handle_route_errors("Failed to fetch products")
async def get_products(catalog: CatalogRepository = Depends(get_catalog)):
    """Get all products"""
    return {"products": [p.to_json() for p in catalog.list_products()]}


@router.get("/api/products/category/{category}")
@handle_route_errors("Failed to fetch products by category")
async def get_products_by_category(category: str, catalog: CatalogRepository = Depends(get_catalog)):
    """Get products in a category (case-insensitive, empty list if none)"""
    products = catalog.list_products_by_category(category)
    return {"products": [p.to_json() for p in products]}


@router.get("/api/products/search/{query}")
@handle_route_errors("Failed to search products")
async def search_products(query: str, catalog: CatalogRepository = Depends(get_catalog)):
    """Search products by name, description, category or sub-category"""
    products = catalog.search_products(query)
    logger.debug(f"Search '{sanitize_string_for_logging(query)}' matched {len(products)} products")
    return {"products": [p.to_json() for p in products]}


@router.get("/api/products/{product_id}")
@handle_route_errors("Failed to fetch product")
async def get_product(product_id: str, catalog: CatalogRepository = Depends(get_catalog)):
    """Get product by ID (400 for a malformed id, 404 if absent)"""
    product = catalog.require_product(product_id)
    return {"product": product.to_json()}


@router.post("/api/products", status_code=201)
@handle_route_errors("Failed to create product")
async def create_product(
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogRepository = Depends(get_catalog),
):
    """Create a product (admin only in a real deployment)"""
    product = catalog.create_product(payload)
    return {"product": product.to_json()}
