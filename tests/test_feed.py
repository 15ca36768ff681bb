"""
Tests for CatalogFeed (latest request wins)
"""

import asyncio

import httpx
import pytest

from storefront.client import ApiError, CatalogFeed
from storefront.models import Product


def make_product(product_id, name):
    return Product(
        id=product_id,
        name=name,
        description=f"{name} description",
        price=1000 * product_id,
        image_url="https://example.com/p.jpg",
        category="Fashion",
    )


class FakeClient:
    """Stands in for StorefrontClient; each call waits on its own event."""

    def __init__(self):
        self.pending = []

    async def _respond(self, result):
        gate = asyncio.Event()
        self.pending.append(gate)
        await gate.wait()
        if isinstance(result, Exception):
            raise result
        return result

    def queue(self, *results):
        self._results = list(results)

    async def list_products(self):
        return await self._respond(self._results.pop(0))

    async def list_products_by_category(self, category):
        return await self._respond(self._results.pop(0))

    async def search_products(self, query):
        return await self._respond(self._results.pop(0))


async def settle():
    for _ in range(3):
        await asyncio.sleep(0)


class TestCatalogFeed:
    """Tests for CatalogFeed."""

    @pytest.mark.asyncio
    async def test_refresh_applies_result(self):
        client = FakeClient()
        client.queue([make_product(1, "Dashiki")])
        feed = CatalogFeed(client)

        task = asyncio.create_task(feed.refresh())
        await settle()
        assert feed.is_loading
        client.pending[0].set()

        assert await task is True
        assert [p.name for p in feed.products] == ["Dashiki"]
        assert feed.loaded and not feed.is_loading
        assert feed.get(1).name == "Dashiki"

    @pytest.mark.asyncio
    async def test_stale_response_is_discarded(self):
        client = FakeClient()
        client.queue([make_product(1, "Old")], [make_product(2, "New")])
        feed = CatalogFeed(client)

        slow = asyncio.create_task(feed.refresh())
        await settle()
        fast = asyncio.create_task(feed.refresh(category="Fashion"))
        await settle()

        # Second request resolves first, then the first one lands late
        client.pending[1].set()
        assert await fast is True
        client.pending[0].set()
        assert await slow is False

        assert [p.name for p in feed.products] == ["New"]

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_snapshot(self):
        client = FakeClient()
        client.queue([make_product(1, "Dashiki")], ApiError(500, "Failed to fetch products"))
        feed = CatalogFeed(client)

        first = asyncio.create_task(feed.refresh())
        await settle()
        client.pending[0].set()
        await first

        second = asyncio.create_task(feed.refresh(query="dash"))
        await settle()
        client.pending[1].set()
        assert await second is False

        assert feed.failed
        assert "Failed to fetch products" in feed.last_error
        assert [p.name for p in feed.products] == ["Dashiki"]

    @pytest.mark.asyncio
    async def test_success_clears_error(self):
        client = FakeClient()
        client.queue(httpx.ConnectError("refused"), [])
        feed = CatalogFeed(client)

        for index in range(2):
            task = asyncio.create_task(feed.refresh())
            await settle()
            client.pending[index].set()
            await task

        assert not feed.failed
        assert feed.loaded
        assert feed.products == []

    @pytest.mark.asyncio
    async def test_superseded_failure_is_ignored(self):
        client = FakeClient()
        client.queue(ApiError(503, "Service unavailable"), [make_product(3, "Fan")])
        feed = CatalogFeed(client)

        failing = asyncio.create_task(feed.refresh())
        await settle()
        newer = asyncio.create_task(feed.refresh())
        await settle()

        client.pending[1].set()
        await newer
        client.pending[0].set()
        assert await failing is False

        assert not feed.failed
        assert [p.name for p in feed.products] == ["Fan"]
