"""
Local Storage Module - key-value stores for shopper-side state

Provides the "local storage" the cart and admin session persist into:
- MemoryStore: process-local dict (tests, ephemeral sessions)
- FileStore: one JSON file per key under a directory (default)
- RedisStore: Upstash Redis, when UPSTASH_REDIS_REST_URL/TOKEN are set

All stores hold string values and expose the same async get/set/delete API
as the Upstash async client.
"""

import asyncio
import re
from pathlib import Path
from typing import Dict, Optional

from upstash_redis.asyncio import Redis as AsyncRedis

from storefront.config import Settings, get_settings
from storefront.logging import get_logger

logger = get_logger(__name__)


class StorageKeys:
    """Keys for shopper-side state."""

    CART = "trossachs_cart"  # CartItem[] JSON
    AUTH = "trossachs_auth"  # {"isAdmin": bool} JSON


class KeyValueStore:
    """Base class for string key-value stores."""

    async def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)


_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.:-]+$")


class FileStore(KeyValueStore):
    """One ``<key>.json`` file per key. File I/O runs in a worker thread."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def _read(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)

    def _remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, key, value)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._remove, key)


class RedisStore(KeyValueStore):
    """Upstash Redis-backed store, namespaced per shopper."""

    def __init__(self, url: str, token: str, namespace: str = "") -> None:
        if not url or not token:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        self._redis = AsyncRedis(url=url, token=token)
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}" if self.namespace else key

    async def get(self, key: str) -> Optional[str]:
        return await self._redis.get(self._key(key))

    async def set(self, key: str, value: str) -> None:
        await self._redis.set(self._key(key), value)

    async def delete(self, key: str) -> None:
        await self._redis.delete(self._key(key))

    async def aclose(self) -> None:
        await self._redis.close()


def get_store(settings: Optional[Settings] = None, namespace: str = "") -> KeyValueStore:
    """
    Build the configured local store.

    Redis when both Upstash variables are set, otherwise a FileStore under
    STOREFRONT_STORAGE_DIR.
    """
    settings = settings or get_settings()
    if settings.redis_configured:
        logger.info("Using Upstash Redis for local storage")
        return RedisStore(settings.redis_url, settings.redis_token, namespace=namespace)
    directory = Path(settings.storage_dir)
    if namespace:
        directory = directory / namespace
    return FileStore(directory)
