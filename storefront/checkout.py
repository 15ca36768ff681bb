"""
Checkout - simulated order submission.

No payment is taken. The order summary is captured from the cart, handed to
an order submitter, and the cart is cleared only once the submitter confirms.
"""
import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Protocol

from storefront.cart import CartLine, CartManager
from storefront.config import get_settings
from storefront.errors import StorefrontError
from storefront.logging import get_logger
from storefront.models import Product

logger = get_logger(__name__)

ORDER_CONFIRMATION_MESSAGE = "Thank you for your order! This is a demo, so no actual order has been placed."
ERROR_EMPTY_CART = "Your cart is empty"
ERROR_CHECKOUT_IN_PROGRESS = "An order is already being placed"
ERROR_CHECKOUT_FAILED = "Failed to place order"


class CheckoutError(StorefrontError):
    status_code = 400


@dataclass
class OrderSummary:
    lines: List[CartLine]
    total_items: int
    subtotal: int


@dataclass
class OrderConfirmation:
    success: bool
    message: str
    summary: Optional[OrderSummary] = None
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class OrderSubmitter(Protocol):
    async def submit(self, summary: OrderSummary) -> OrderConfirmation: ...


class SimulatedSubmitter:
    """Waits a fixed delay, then reports success."""

    def __init__(self, delay: Optional[float] = None) -> None:
        self.delay = get_settings().checkout_delay_seconds if delay is None else delay

    async def submit(self, summary: OrderSummary) -> OrderConfirmation:
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return OrderConfirmation(success=True, message=ORDER_CONFIRMATION_MESSAGE, summary=summary)


class CheckoutService:
    def __init__(self, cart_manager: CartManager, submitter: Optional[OrderSubmitter] = None) -> None:
        self.cart_manager = cart_manager
        self.submitter = submitter or SimulatedSubmitter()
        self._submitting = False

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def summarize(self, products: Iterable[Product]) -> OrderSummary:
        lines = self.cart_manager.cart_lines(products)
        return OrderSummary(
            lines=lines,
            total_items=self.cart_manager.get_cart_count(),
            subtotal=sum(line.line_total for line in lines),
        )

    async def submit(self, products: Iterable[Product]) -> OrderConfirmation:
        """
        Place the order for the current cart.

        Raises:
            CheckoutError: cart empty, another submission running, or the
                submitter failed (cart left untouched)
        """
        if self.cart_manager.cart.is_empty:
            raise CheckoutError(ERROR_EMPTY_CART)
        if self._submitting:
            raise CheckoutError(ERROR_CHECKOUT_IN_PROGRESS)

        summary = self.summarize(products)
        self._submitting = True
        try:
            confirmation = await self.submitter.submit(summary)
        except Exception as e:
            logger.error(f"Order submission failed: {e}", exc_info=True)
            raise CheckoutError(ERROR_CHECKOUT_FAILED) from e
        finally:
            self._submitting = False

        if not confirmation.success:
            logger.warning(f"Order not confirmed: {confirmation.message}")
            raise CheckoutError(confirmation.message or ERROR_CHECKOUT_FAILED)

        await self.cart_manager.clear_cart()
        logger.info(f"Order placed: {summary.total_items} items, subtotal {summary.subtotal}")
        return confirmation
