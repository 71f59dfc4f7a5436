"""Shared cart badge state (header item count)."""
from typing import Callable, Optional

from storefront.logging import get_logger
from storefront.models import Cart

logger = get_logger(__name__)

CountListener = Callable[[int], None]


class CartBadgeStore:
    """
    Item count shown on the cart badge, shared by every view that displays it.

    Listeners are called only when the count actually changes.
    """

    def __init__(self, item_count: int = 0):
        self._item_count = item_count
        self._listeners: list[CountListener] = []

    @property
    def item_count(self) -> int:
        return self._item_count

    def subscribe(self, listener: CountListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_count(self, count: int) -> None:
        count = max(0, int(count))
        if count == self._item_count:
            return
        self._item_count = count
        for listener in list(self._listeners):
            try:
                listener(count)
            except Exception as e:
                logger.warning(f"Cart badge listener failed: {e}", exc_info=True)

    def sync_from_cart(self, cart: Optional[Cart]) -> None:
        self.set_count(cart.item_count if cart else 0)


# Process default, for front ends that do not wire their own store
_badge_store: Optional[CartBadgeStore] = None


def get_cart_badge_store() -> CartBadgeStore:
    """Get the default CartBadgeStore."""
    global _badge_store
    if _badge_store is None:
        _badge_store = CartBadgeStore()
    return _badge_store
