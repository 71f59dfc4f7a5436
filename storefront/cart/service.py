"""Cart view-model.

Consistency model: the client never patches its cart snapshot locally. Every
accepted mutation is followed by a full refetch, so the item list and the
total are always what the server last reported. Requests are not debounced,
sequenced or cancelled; when mutations overlap, whichever refetch settles
last wins.
"""
from decimal import Decimal
from typing import Optional

from storefront.cart.badge import CartBadgeStore, get_cart_badge_store
from storefront.client import StorefrontClient
from storefront.config import DEFAULT_ITEM_CURRENCY, DEFAULT_SUMMARY_CURRENCY
from storefront.errors import (
    ERROR_CHECKOUT,
    ERROR_LOAD_CART,
    ERROR_REMOVE_ITEM,
    ERROR_UPDATE_CART,
    SUCCESS_CART_UPDATED,
    SUCCESS_ITEM_REMOVED,
    StorefrontError,
)
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.models import Cart, CartItem, CheckoutSession
from storefront.money import format_money
from storefront.navigation import Navigator
from storefront.notifications import Notifier

logger = get_logger(__name__)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


class CartViewModel:
    """
    State and actions behind the cart page.

    Features:
    - Refetch after every successful mutation (no optimistic update)
    - Decrement blocked at quantity 1
    - One-shot checkout redirect to the payment provider
    """

    def __init__(
        self,
        client: StorefrontClient,
        notifier: Optional[Notifier] = None,
        navigator: Optional[Navigator] = None,
        badge_store: Optional[CartBadgeStore] = None,
        item_currency: str = DEFAULT_ITEM_CURRENCY,
        summary_currency: str = DEFAULT_SUMMARY_CURRENCY,
    ):
        self.client = client
        self.notifier = notifier or Notifier()
        self.navigator = navigator or Navigator()
        self.badge_store = badge_store or get_cart_badge_store()
        self.item_currency = item_currency
        self.summary_currency = summary_currency

        self.cart: Optional[Cart] = None
        self.loading = False

    # ==================== STATE ====================

    @property
    def items(self) -> list[CartItem]:
        return self.cart.items if self.cart else []

    @property
    def is_empty(self) -> bool:
        """No cart and an empty cart look the same to the user."""
        return not self.items

    def get_item(self, item_id: str) -> Optional[CartItem]:
        return self.cart.get_item(item_id) if self.cart else None

    @staticmethod
    def can_decrement(item: CartItem) -> bool:
        return item.quantity > 1

    # ==================== ACTIONS ====================

    async def fetch_cart(self) -> Optional[Cart]:
        """Reload the cart from the server. On failure the previous snapshot is kept."""
        self.loading = True
        try:
            cart = await self.client.get_cart()
        except StorefrontError as e:
            logger.error(f"Failed to fetch cart: {e}")
            self.notifier.error(ERROR_LOAD_CART)
            return self.cart
        finally:
            self.loading = False

        self.cart = cart
        self.badge_store.sync_from_cart(cart)
        return cart

    async def update_quantity(self, item_id: str, quantity: int) -> bool:
        """Set an item's quantity, then resynchronize. Returns True on success."""
        if not _is_positive_int(quantity):
            logger.debug(
                "Ignoring quantity %r for item %s", quantity, sanitize_id_for_logging(item_id)
            )
            return False

        try:
            await self.client.update_cart_item(item_id, quantity)
        except StorefrontError as e:
            logger.error(f"Failed to update quantity: {e}")
            self.notifier.error(ERROR_UPDATE_CART)
            return False

        await self.fetch_cart()
        self.notifier.success(SUCCESS_CART_UPDATED)
        return True

    async def increment(self, item_id: str) -> bool:
        item = self.get_item(item_id)
        if item is None:
            return False
        return await self.update_quantity(item_id, item.quantity + 1)

    async def decrement(self, item_id: str) -> bool:
        """Decrease quantity by one. Disabled (no request) at quantity 1."""
        item = self.get_item(item_id)
        if item is None or not self.can_decrement(item):
            return False
        return await self.update_quantity(item_id, item.quantity - 1)

    async def set_quantity_from_input(self, item_id: str, raw: str) -> bool:
        """Apply a typed quantity. Non-numeric and non-positive input is ignored."""
        try:
            quantity = int(str(raw).strip())
        except ValueError:
            return False
        if quantity <= 0:
            return False
        return await self.update_quantity(item_id, quantity)

    async def remove_item(self, item_id: str) -> bool:
        try:
            await self.client.remove_cart_item(item_id)
        except StorefrontError as e:
            logger.error(f"Failed to remove item: {e}")
            self.notifier.error(ERROR_REMOVE_ITEM)
            return False

        await self.fetch_cart()
        self.notifier.success(SUCCESS_ITEM_REMOVED)
        return True

    async def checkout(self) -> Optional[CheckoutSession]:
        """Create a payment session and hand the browser over to the provider.

        Nothing is tracked after the redirect.
        """
        try:
            session = await self.client.create_checkout()
        except StorefrontError as e:
            logger.error(f"Checkout error: {e}")
            self.notifier.error(ERROR_CHECKOUT)
            return None

        self.navigator.navigate(session.bkash_url)
        return session

    # ==================== DISPLAY ====================

    def format_unit_price(self, item: CartItem) -> str:
        return format_money(item.price, self.item_currency)

    def format_line_total(self, item: CartItem) -> str:
        return format_money(item.line_total, self.item_currency)

    def format_subtotal(self) -> str:
        return format_money(self.cart.total if self.cart else 0, self.summary_currency)

    def format_processing_fee(self) -> str:
        return format_money(Decimal("0"), self.summary_currency)

    def format_total(self) -> str:
        # Server total with the summary label, even if items use another label
        return format_money(self.cart.total if self.cart else 0, self.summary_currency)
