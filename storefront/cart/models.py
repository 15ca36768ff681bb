"""Cart models: shopper-held product quantities joined against a catalog snapshot."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from storefront.models import Product


@dataclass
class CartItem:
    """Single item in the cart."""
    product_id: int
    quantity: int

    def to_dict(self) -> dict:
        """Convert to the persisted (camelCase) form."""
        return {"productId": self.product_id, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from the persisted form. Raises on malformed entries."""
        product_id = data["productId"]
        quantity = data["quantity"]
        for value in (product_id, quantity):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("productId and quantity must be integers")
        item = cls(product_id=product_id, quantity=quantity)
        if item.quantity < 1:
            raise ValueError(f"Invalid quantity {item.quantity} for product {item.product_id}")
        return item


@dataclass
class CartLine:
    """A cart item joined with its product from a catalog snapshot."""
    product_id: int
    quantity: int
    product: Optional[Product]

    @property
    def available(self) -> bool:
        """False for an orphaned item (product missing from the snapshot)."""
        return self.product is not None

    @property
    def unit_price(self) -> int:
        return self.product.price if self.product else 0

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity


def index_products(products: Iterable[Product]) -> Dict[int, Product]:
    return {p.id: p for p in products}


@dataclass
class Cart:
    """Shopping cart: at most one item per product id, in insertion order."""
    items: List[CartItem] = field(default_factory=list)

    def find(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    @property
    def total_items(self) -> int:
        """Sum of quantities across all items."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def quantities(self) -> Dict[int, int]:
        return {item.product_id: item.quantity for item in self.items}

    def lines(self, products: Iterable[Product]) -> List[CartLine]:
        by_id = index_products(products)
        return [
            CartLine(product_id=item.product_id, quantity=item.quantity, product=by_id.get(item.product_id))
            for item in self.items
        ]

    def subtotal(self, products: Iterable[Product]) -> int:
        """Sum of price x quantity; items missing from ``products`` count as 0."""
        return sum(line.line_total for line in self.lines(products))

    def to_list(self) -> List[dict]:
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: list) -> "Cart":
        """Create from the persisted list; duplicate product ids are merged."""
        if not isinstance(data, list):
            raise TypeError(f"Expected a list of cart items, got {type(data).__name__}")
        merged: Dict[int, int] = {}
        for entry in data:
            item = CartItem.from_dict(entry)
            merged[item.product_id] = merged.get(item.product_id, 0) + item.quantity
        return cls(items=[CartItem(product_id=pid, quantity=qty) for pid, qty in merged.items()])
