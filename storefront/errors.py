"""
Storefront errors.

Message constants are shared by the repository, the routes and the client so
the same wording reaches the shopper wherever the failure is detected.
"""
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_INVALID_PRODUCT_ID = "Invalid product ID"
ERROR_INVALID_PRODUCT_DATA = "Invalid product data"
ERROR_SEARCH_TOO_SHORT = "Search query must be at least 2 characters"

# Category errors
ERROR_CATEGORY_NOT_FOUND = "Category not found"
ERROR_INVALID_CATEGORY_DATA = "Invalid category data"
ERROR_DUPLICATE_CATEGORY = "Category with this name or slug already exists"

# Site content errors
ERROR_PAGE_NOT_FOUND = "Page not found"
ERROR_INVALID_SETTINGS_DATA = "Invalid site settings data"
ERROR_INVALID_SLIDES = "Invalid data format. Expected array of slides"
ERROR_INVALID_PAGE_DATA = "Invalid page content data"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_ADMIN_REQUIRED = "Admin access required"
ERROR_INTERNAL = "Internal server error"


class StorefrontError(Exception):
    """Base class for errors that carry an HTTP status."""

    status_code = 500

    def __init__(self, message: str = ERROR_INTERNAL, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class InvalidIdError(StorefrontError):
    status_code = 400


class SearchQueryTooShort(StorefrontError):
    status_code = 400


class NotFoundError(StorefrontError):
    status_code = 404


class ConflictError(StorefrontError):
    status_code = 409


class ForbiddenError(StorefrontError):
    status_code = 403


class ValidationFailed(StorefrontError):
    """Input failed schema validation; ``errors`` lists the offending fields."""

    status_code = 400

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, message: str, exc: ValidationError) -> "ValidationFailed":
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in exc.errors()
        ]
        return cls(message, errors)

    @property
    def fields(self) -> List[str]:
        return [err["field"] for err in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "errors": self.errors}
