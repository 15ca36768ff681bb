"""FastAPI dependency guarding admin routes."""
import hmac
from typing import Optional

from fastapi import Header, Request

from storefront.errors import ERROR_ADMIN_REQUIRED, ForbiddenError


async def verify_admin(
    request: Request,
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> bool:
    """
    Require ``Authorization: Bearer <ADMIN_API_KEY>`` when a key is configured.

    Without a configured key admin routes stay open, matching the storefront's
    client-side-only admin login.
    """
    api_key = request.app.state.settings.admin_api_key
    if not api_key:
        return False

    if not hmac.compare_digest((authorization or "").encode(), f"Bearer {api_key}".encode()):
        raise ForbiddenError(ERROR_ADMIN_REQUIRED)
    return True
