"""Cart manager service backed by a local key-value store."""
import json
from typing import Iterable, List, Optional

from storefront.logging import get_logger
from storefront.models import Product
from .models import Cart, CartItem, CartLine, index_products
from .storage import KeyValueStore, StorageKeys, get_store

logger = get_logger(__name__)


def _check_product_id(product_id) -> int:
    if isinstance(product_id, bool) or not isinstance(product_id, int):
        raise ValueError("product_id must be an integer")
    return product_id


class CartManager:
    """
    Manages the shopper's cart.

    State is held in memory and replaced wholesale on every mutation; the
    whole collection is then written to the store under a single key.
    Persistence is best-effort: a failed write is logged and the in-memory
    cart stays authoritative.

    Call ``load()`` once at startup before mutating.
    """

    def __init__(self, store: KeyValueStore, key: str = StorageKeys.CART):
        self.store = store
        self.key = key
        self._cart = Cart()
        self._loaded = False

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def items(self) -> List[CartItem]:
        return list(self._cart.items)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    async def load(self) -> Cart:
        """Load the cart from the store. Corrupt data yields an empty cart."""
        self._loaded = True
        try:
            data = await self.store.get(self.key)
        except Exception as e:
            logger.error(f"Failed to read cart from storage: {e}")
            self._cart = Cart()
            return self._cart

        if not data:
            self._cart = Cart()
            return self._cart

        try:
            self._cart = Cart.from_list(json.loads(data))
        except (ValueError, KeyError, TypeError, OverflowError, RecursionError) as e:
            # Corrupted data - clear it and start empty
            logger.warning(f"Corrupted cart data in storage, resetting: {e}")
            self._cart = Cart()
            try:
                await self.store.delete(self.key)
            except Exception as delete_error:
                logger.error(f"Failed to clear corrupted cart data: {delete_error}")
        return self._cart

    async def _persist(self) -> bool:
        try:
            await self.store.set(self.key, json.dumps(self._cart.to_list()))
            return True
        except Exception as e:
            logger.error(f"Failed to save cart to storage: {e}")
            return False

    async def _replace(self, items: List[CartItem]) -> Cart:
        self._cart = Cart(items=items)
        await self._persist()
        return self._cart

    async def add_to_cart(self, product_id: int, quantity: int = 1) -> Cart:
        """Add ``quantity`` units; repeated adds of the same product accumulate."""
        _check_product_id(product_id)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise ValueError("quantity must be a non-negative integer")
        if quantity == 0:
            return self._cart

        if self._cart.find(product_id) is None:
            items = self.items + [CartItem(product_id=product_id, quantity=quantity)]
        else:
            items = [
                CartItem(product_id=item.product_id, quantity=item.quantity + quantity)
                if item.product_id == product_id else item
                for item in self._cart.items
            ]
        return await self._replace(items)

    async def update_quantity(self, product_id: int, quantity: int) -> Cart:
        """Set an absolute quantity; zero or less removes the item."""
        _check_product_id(product_id)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError("quantity must be an integer")
        if quantity <= 0:
            return await self.remove_from_cart(product_id)
        if self._cart.find(product_id) is None:
            return self._cart

        items = [
            CartItem(product_id=item.product_id, quantity=quantity)
            if item.product_id == product_id else item
            for item in self._cart.items
        ]
        return await self._replace(items)

    async def remove_from_cart(self, product_id: int) -> Cart:
        _check_product_id(product_id)
        return await self._replace([item for item in self._cart.items if item.product_id != product_id])

    async def clear_cart(self) -> Cart:
        return await self._replace([])

    def get_cart_count(self) -> int:
        return self._cart.total_items

    def get_subtotal(self, products: Iterable[Product]) -> int:
        """Subtotal against a product snapshot; orphaned items contribute 0."""
        return self._cart.subtotal(products)

    def cart_lines(self, products: Iterable[Product]) -> List[CartLine]:
        """Cart items joined with ``products`` for display."""
        return self._cart.lines(products)

    def orphaned_ids(self, products: Iterable[Product]) -> List[int]:
        by_id = index_products(products)
        return [item.product_id for item in self._cart.items if item.product_id not in by_id]

    async def reconcile(self, products: Iterable[Product]) -> List[int]:
        """
        Drop items whose product is missing from a fresh snapshot.

        Returns:
            Product ids that were removed
        """
        products = list(products)
        orphaned = self.orphaned_ids(products)
        if orphaned:
            logger.info(f"Removing {len(orphaned)} unavailable products from cart: {orphaned}")
            await self._replace([item for item in self._cart.items if item.product_id not in orphaned])
        return orphaned

    def get_cart_summary(self, products: Iterable[Product]) -> dict:
        """Display-ready summary of the cart against a product snapshot."""
        lines = self.cart_lines(products)
        return {
            "is_empty": not lines,
            "total_items": self.get_cart_count(),
            "items": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product.name if line.product else None,
                    "quantity": line.quantity,
                    "unit_price": line.unit_price,
                    "total": line.line_total,
                    "available": line.available,
                }
                for line in lines
            ],
            "subtotal": sum(line.line_total for line in lines),
        }


async def create_cart_manager(store: Optional[KeyValueStore] = None) -> CartManager:
    """Build a CartManager on the configured store and load it."""
    manager = CartManager(store or get_store())
    await manager.load()
    return manager
