"""Pytest configuration and fixtures"""
import os

import pytest
from fastapi.testclient import TestClient

# Keep tests away from a developer's .env and real Redis
os.environ.setdefault("SEED_CATALOG", "true")
os.environ.pop("UPSTASH_REDIS_REST_URL", None)
os.environ.pop("UPSTASH_REDIS_REST_TOKEN", None)

from storefront.app import create_app  # noqa: E402
from storefront.cart import CartManager  # noqa: E402
from storefront.config import Settings  # noqa: E402
from storefront.db import MemoryStore  # noqa: E402
from storefront.services.catalog import CatalogRepository  # noqa: E402


@pytest.fixture
def settings():
    """Settings for an open (no API key) storefront"""
    return Settings(checkout_delay_seconds=0)


@pytest.fixture
def catalog():
    """Seeded catalog, fresh per test"""
    return CatalogRepository()


@pytest.fixture
def empty_catalog():
    return CatalogRepository(seed=False)


@pytest.fixture
def app(catalog, settings):
    return create_app(catalog=catalog, settings=settings)


@pytest.fixture
def client(app):
    """Test client"""
    return TestClient(app)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def cart_manager(store):
    return CartManager(store)


@pytest.fixture
def products(catalog):
    """Product snapshot as a shopper would hold it"""
    return catalog.list_products()


@pytest.fixture
def sample_product():
    """Sample product payload (wire format)"""
    return {
        "name": "Adire Tie-Dye Shirt",
        "description": "Hand-dyed indigo adire shirt from Abeokuta.",
        "price": 14000,
        "imageUrl": "https://example.com/adire.jpg",
        "category": "Fashion",
        "subCategory": "Men",
        "isNew": True,
        "rating": 4.1,
        "reviewCount": 3,
    }
