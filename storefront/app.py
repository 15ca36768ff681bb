"""
Storefront API - FastAPI application factory.

The catalog repository and settings are built here and attached to
``app.state``; pass your own to ``create_app`` for an isolated instance.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.config import Settings, get_settings
from storefront.errors import ERROR_INVALID_REQUEST, StorefrontError, ValidationFailed
from storefront.logging import get_logger
from storefront.routers import admin_router, categories_router, content_router, products_router
from storefront.services.catalog import CatalogRepository

logger = get_logger(__name__)


def create_app(
    catalog: Optional[CatalogRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    owns_catalog = catalog is None
    if owns_catalog:
        catalog = CatalogRepository(seed=settings.seed_catalog)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        logger.info("Storefront API started")
        yield
        # An injected catalog belongs to the caller
        if owns_catalog:
            app.state.catalog.close()
        logger.info("Storefront API stopped")

    app = FastAPI(title="Trossachs Storefront API", version="0.1.0", lifespan=lifespan)
    app.state.catalog = catalog
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = ValidationFailed(ERROR_INVALID_REQUEST, [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ])
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(products_router)
    app.include_router(categories_router)
    app.include_router(content_router)
    app.include_router(admin_router)

    return app
