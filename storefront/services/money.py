"""
Money Utilities - Naira display helpers.

Prices are whole Naira integers throughout; there are no minor units.
"""
from typing import Tuple, Union

NAIRA_SYMBOL = "₦"


def format_price(price: Union[int, float]) -> str:
    """Format a price for display, e.g. 12500 -> "₦12,500"."""
    return f"{NAIRA_SYMBOL}{int(round(price)):,}"


def discount_percent(price: int, old_price: Union[int, None]) -> int:
    """Percent saved against ``old_price``; 0 when there is no real discount."""
    if not old_price or old_price <= price:
        return 0
    # Half rounds up, as shown on the storefront badges
    return int((old_price - price) * 100 / old_price + 0.5)


def rating_stars(rating: float) -> Tuple[int, int, int]:
    """
    Split a 0-5 rating into star counts.

    Returns:
        (full, half, empty) stars, always summing to 5
    """
    rating = max(0.0, min(5.0, float(rating)))
    full = int(rating)
    half = 1 if rating - full >= 0.5 else 0
    return full, half, 5 - full - half
