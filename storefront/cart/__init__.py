"""Cart package: view-model and shared badge store."""
from .badge import CartBadgeStore, get_cart_badge_store
from .service import CartViewModel

__all__ = [
    "CartBadgeStore",
    "CartViewModel",
    "get_cart_badge_store",
]
