"""
Storefront logging.

Every module logs through a child of the ``storefront`` logger:

    from storefront.logging import get_logger
    logger = get_logger(__name__)

The package logger gets one stdout handler on first use. LOG_LEVEL sets the
level; on Vercel (VERCEL=1) timestamps are left to the platform.
"""

import logging
import os
import sys
from functools import cache

PACKAGE_LOGGER = "storefront"

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_FORMAT_PLATFORM = "%(levelname)s [%(name)s] %(message)s"

_CONTROL_CHARS = {"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""}


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach the stdout handler to the package logger (once) and set its level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        on_platform = os.environ.get("VERCEL") == "1"
        handler.setFormatter(logging.Formatter(LOG_FORMAT_PLATFORM if on_platform else LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, placed under the ``storefront`` hierarchy."""
    configure_logging()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make shopper input (search query, slug) safe to put in a log line.

    Control characters are escaped so a query cannot forge extra lines, and
    long values are cut to ``max_length``. Empty values log as "N/A".
    """
    if not value:
        return "N/A"
    text = "".join(_CONTROL_CHARS.get(ch, ch) for ch in str(value))
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_string_for_logging",
]
