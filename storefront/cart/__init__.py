"""Cart package: models, storage, and manager facade."""
from .models import Cart, CartItem, CartLine
from .service import CartManager, create_cart_manager

__all__ = [
    "Cart",
    "CartItem",
    "CartLine",
    "CartManager",
    "create_cart_manager",
]
