"""Storefront client: view-models for a multi-tenant shop backed by a JSON API."""
from .cart import CartBadgeStore, CartViewModel, get_cart_badge_store
from .client import StorefrontClient
from .errors import (
    ResponseStatusError,
    ResponseValidationError,
    StorefrontError,
    TransportError,
)
from .navigation import Navigator
from .notifications import Notification, Notifier

__all__ = [
    "CartBadgeStore",
    "CartViewModel",
    "Navigator",
    "Notification",
    "Notifier",
    "ResponseStatusError",
    "ResponseValidationError",
    "StorefrontClient",
    "StorefrontError",
    "TransportError",
    "get_cart_badge_store",
]

__version__ = "0.1.0"
