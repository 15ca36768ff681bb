"""
Storefront API client.

Async httpx client for the catalog REST API, used by the shopper side.

Retry policy:
- reads (GET) retry on transport errors and 5xx responses, up to 2 retries
  with exponential backoff (1s, 2s, ... capped at 30s)
- 4xx responses are never retried
- mutations are never retried
"""
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import httpx
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

from storefront.config import get_settings
from storefront.errors import StorefrontError
from storefront.logging import get_logger
from storefront.models import Category, HeroSlide, PageContent, Product, SiteSettings

logger = get_logger(__name__)

MAX_READ_ATTEMPTS = 3  # first try + 2 retries
DEFAULT_RETRY_WAIT = wait_exponential(multiplier=1, min=1, max=30)


class ApiError(StorefrontError):
    """Non-2xx response from the storefront API."""

    def __init__(self, status_code: int, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message, status_code=status_code)
        self.errors = errors or []

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, ApiError) and exc.status_code >= 500


def _segment(value: Union[str, int]) -> str:
    return quote(str(value), safe="")


class StorefrontClient:
    """
    Client for the storefront REST API.

    Usage:
        async with StorefrontClient("http://localhost:5000") as client:
            products = await client.list_products()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_attempts: int = MAX_READ_ATTEMPTS,
        retry_wait=DEFAULT_RETRY_WAIT,
    ):
        self.base_url = base_url or get_settings().api_url
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            transport=transport,
            timeout=httpx.Timeout(10.0, connect=5.0),
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ==================== TRANSPORT ====================

    async def _request(self, method: str, path: str, json: Any = None) -> Dict[str, Any]:
        response = await self._http.request(method, path, json=json)
        if response.is_error:
            message = response.reason_phrase or "Request failed"
            errors = None
            try:
                body = response.json()
                message = body.get("message", message)
                errors = body.get("errors")
            except ValueError:
                pass
            logger.warning(f"{method} {path} failed: {response.status_code} {message}")
            raise ApiError(response.status_code, message, errors)
        return response.json()

    async def _get(self, path: str) -> Dict[str, Any]:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.info(f"Retrying GET {path} (attempt {attempt.retry_state.attempt_number})")
                result = await self._request("GET", path)
        return result

    # ==================== PRODUCTS ====================

    async def list_products(self) -> List[Product]:
        data = await self._get("/api/products")
        return [Product.model_validate(p) for p in data["products"]]

    async def get_product(self, product_id: Union[str, int]) -> Product:
        data = await self._get(f"/api/products/{_segment(product_id)}")
        return Product.model_validate(data["product"])

    async def list_products_by_category(self, category: str) -> List[Product]:
        data = await self._get(f"/api/products/category/{_segment(category)}")
        return [Product.model_validate(p) for p in data["products"]]

    async def search_products(self, query: str) -> List[Product]:
        data = await self._get(f"/api/products/search/{_segment(query)}")
        return [Product.model_validate(p) for p in data["products"]]

    async def create_product(self, product: Dict[str, Any]) -> Product:
        data = await self._request("POST", "/api/products", json=product)
        return Product.model_validate(data["product"])

    async def update_product(self, product_id: Union[str, int], changes: Dict[str, Any]) -> Product:
        data = await self._request("PATCH", f"/api/admin/products/{_segment(product_id)}", json=changes)
        return Product.model_validate(data["product"])

    # ==================== CATEGORIES ====================

    async def list_categories(self) -> List[Category]:
        data = await self._get("/api/categories")
        return [Category.model_validate(c) for c in data["categories"]]

    async def get_category(self, slug: str) -> Category:
        data = await self._get(f"/api/categories/{_segment(slug)}")
        return Category.model_validate(data["category"])

    async def create_category(self, category: Dict[str, Any]) -> Category:
        data = await self._request("POST", "/api/categories", json=category)
        return Category.model_validate(data["category"])

    # ==================== SITE CONTENT ====================

    async def get_settings(self) -> SiteSettings:
        data = await self._get("/api/admin/settings")
        return SiteSettings.model_validate(data["settings"])

    async def update_settings(self, changes: Dict[str, Any]) -> SiteSettings:
        data = await self._request("PATCH", "/api/admin/settings", json=changes)
        return SiteSettings.model_validate(data["settings"])

    async def get_hero_slides(self) -> List[HeroSlide]:
        data = await self._get("/api/hero-carousel")
        return [HeroSlide.model_validate(s) for s in data["slides"]]

    async def update_hero_slides(self, slides: List[Dict[str, Any]]) -> List[HeroSlide]:
        data = await self._request("PATCH", "/api/admin/hero-carousel", json={"slides": slides})
        return [HeroSlide.model_validate(s) for s in data["slides"]]

    async def get_page(self, page: str) -> PageContent:
        data = await self._get(f"/api/pages/{_segment(page)}")
        return PageContent.model_validate(data["content"])

    async def update_page(self, page: str, content: Dict[str, Any]) -> PageContent:
        data = await self._request("PATCH", f"/api/admin/pages/{_segment(page)}", json={"content": content})
        return PageContent.model_validate(data["content"])
