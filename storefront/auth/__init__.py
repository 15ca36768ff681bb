"""Admin session flag and admin route guard."""
from .dependencies import verify_admin
from .session import AdminSession

__all__ = [
    "AdminSession",
    "verify_admin",
]
