"""
Storefront Errors

Exception types raised by the HTTP layer and the user-facing messages the
view-models show when an operation fails. Messages are kept here to avoid
string duplication across views.
"""

# Cart
ERROR_LOAD_CART = "Failed to load cart"
ERROR_UPDATE_CART = "Failed to update cart"
ERROR_REMOVE_ITEM = "Failed to remove item from cart"
ERROR_CHECKOUT = "Failed to process checkout"

# Store / catalog
ERROR_FETCH_STORE = "Failed to fetch store"
ERROR_FETCH_STORE_DATA = "Failed to fetch store data"
ERROR_FETCH_PRODUCTS = "Failed to fetch products"
ERROR_FETCH_PRODUCT = "Failed to fetch product"

# Contact
ERROR_SEND_MESSAGE = "Failed to send message"

# Success messages
SUCCESS_CART_UPDATED = "Cart updated successfully"
SUCCESS_ITEM_REMOVED = "Item removed from cart"
SUCCESS_MESSAGE_SENT = "Your message has been sent successfully"


class StorefrontError(Exception):
    """Base class for every failure the storefront client reports."""

    def __init__(self, message: str, *, method: str = "", url: str = ""):
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url


class TransportError(StorefrontError):
    """The request never produced a response (DNS, connect, timeout...)."""


class ResponseStatusError(StorefrontError):
    """The backend answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int, method: str = "", url: str = ""):
        super().__init__(message, method=method, url=url)
        self.status_code = status_code


class ResponseValidationError(StorefrontError):
    """The backend answered 2xx but the body did not match the expected schema."""
