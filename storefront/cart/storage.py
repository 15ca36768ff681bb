"""Local storage access for the cart."""
from storefront.db import KeyValueStore, MemoryStore, StorageKeys, get_store

__all__ = ["KeyValueStore", "MemoryStore", "StorageKeys", "get_store"]
