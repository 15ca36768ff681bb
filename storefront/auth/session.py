"""Admin session flag for the storefront UI.

A shared-password check that toggles a persisted ``{"isAdmin": bool}`` flag.
It only controls whether admin affordances are shown; it grants nothing on
the server.
"""
import hmac
import json
from typing import Optional

from storefront.config import get_settings
from storefront.db import KeyValueStore, StorageKeys
from storefront.logging import get_logger

logger = get_logger(__name__)


class AdminSession:
    def __init__(self, store: KeyValueStore, password: Optional[str] = None, key: str = StorageKeys.AUTH):
        self.store = store
        self.key = key
        self._password = password if password is not None else get_settings().admin_password
        self.is_admin = False

    async def load(self) -> bool:
        """Restore the flag. Unreadable data is removed and treated as logged out."""
        self.is_admin = False
        try:
            data = await self.store.get(self.key)
        except Exception as e:
            logger.error(f"Failed to read admin session from storage: {e}")
            return self.is_admin

        if not data:
            return self.is_admin
        try:
            self.is_admin = bool(json.loads(data)["isAdmin"])
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            logger.warning(f"Corrupted admin session data, clearing: {e}")
            self.is_admin = False
            try:
                await self.store.delete(self.key)
            except Exception as delete_error:
                logger.error(f"Failed to clear corrupted admin session: {delete_error}")
        return self.is_admin

    async def _save(self) -> None:
        try:
            await self.store.set(self.key, json.dumps({"isAdmin": self.is_admin}))
        except Exception as e:
            logger.error(f"Failed to save admin session: {e}")

    async def login(self, password: str) -> bool:
        if not hmac.compare_digest(password.encode(), self._password.encode()):
            logger.info("Admin login rejected")
            return False
        self.is_admin = True
        await self._save()
        return True

    async def logout(self) -> None:
        self.is_admin = False
        await self._save()
