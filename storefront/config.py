"""
Storefront configuration.

Every setting comes from the environment (a local ``.env`` is loaded first
when present). Read through ``get_settings()``; tests build ``Settings``
directly.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API and the shopper-side client."""

    api_url: str = "http://localhost:5000"
    storage_dir: str = ".storefront"
    redis_url: str = ""
    redis_token: str = ""
    admin_password: str = "admin123"
    admin_api_key: Optional[str] = None
    checkout_delay_seconds: float = 2.0
    seed_catalog: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def redis_configured(self) -> bool:
        return bool(self.redis_url and self.redis_token)

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.environ.get("CORS_ORIGINS", "*")
        return cls(
            api_url=os.environ.get("STOREFRONT_API_URL", cls.api_url),
            storage_dir=os.environ.get("STOREFRONT_STORAGE_DIR", cls.storage_dir),
            redis_url=os.environ.get("UPSTASH_REDIS_REST_URL", ""),
            redis_token=os.environ.get("UPSTASH_REDIS_REST_TOKEN", ""),
            admin_password=os.environ.get("ADMIN_PASSWORD", cls.admin_password),
            admin_api_key=os.environ.get("ADMIN_API_KEY") or None,
            checkout_delay_seconds=_env_float("CHECKOUT_DELAY_SECONDS", cls.checkout_delay_seconds),
            seed_catalog=_env_bool("SEED_CATALOG", True),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings from the environment (cached)."""
    load_dotenv()
    return Settings.from_env()
