"""Storefront API Client - async HTTP/JSON access to the storefront backend.

Every failure is raised as a StorefrontError subclass:
- TransportError: no response at all
- ResponseStatusError: any non-2xx status (the body is not inspected)
- ResponseValidationError: 2xx with a body that does not match the schema
"""
from typing import Any, Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from storefront.config import Settings
from storefront.errors import (
    ResponseStatusError,
    ResponseValidationError,
    TransportError,
)
from storefront.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from storefront.models import Cart, CheckoutSession, ContactMessage, Product, Store

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

_PRODUCT_LIST = TypeAdapter(list[Product])


def _segment(value: str) -> str:
    """Quote a value used as a single URL path segment."""
    return quote(str(value), safe="")


class StorefrontClient:
    """Client for the storefront backend API.

    The underlying httpx.AsyncClient is created lazily and shared by all
    calls; close it with `aclose()` or use the client as an async context
    manager.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        cookies: Optional[dict[str, str]] = None,
        headers: Optional[dict[str, str]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = Settings.from_env()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.timeout = timeout or settings.timeout
        self.cookies = cookies or {}
        self.headers = {"Accept": "application/json", **(headers or {})}
        self._http_client: httpx.AsyncClient | None = http_client

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of shared httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=5.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                cookies=self.cookies,
                headers=self.headers,
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ==================== TRANSPORT ====================

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        client = await self._get_http_client()
        url = f"{self.base_url}{path}"
        try:
            response = await client.request(method, url, json=json, params=params)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"Request failed: {e!s}", method=method, url=path) from e

        if not response.is_success:
            logger.warning("%s %s returned HTTP %s", method, path, response.status_code)
            raise ResponseStatusError(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                method=method,
                url=path,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response, method: str, path: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ResponseValidationError(
                "Response body is not valid JSON", method=method, url=path
            ) from e

    def _parse(self, response: httpx.Response, model: type[M], method: str, path: str) -> M:
        data = self._json(response, method, path)
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "%s %s: invalid %s payload (%d errors)", method, path, model.__name__, e.error_count()
            )
            raise ResponseValidationError(
                f"Invalid {model.__name__} payload", method=method, url=path
            ) from e

    # ==================== CART ====================

    async def get_cart(self) -> Optional[Cart]:
        """Fetch the session's cart. Returns None when the server has no cart."""
        path = "/api/cart"
        try:
            response = await self._request("GET", path)
        except ResponseStatusError as e:
            if e.status_code == 404:
                return None
            raise
        if self._json(response, "GET", path) is None:
            return None
        return self._parse(response, Cart, "GET", path)

    async def update_cart_item(self, item_id: str, quantity: int) -> None:
        """Set a cart line's quantity."""
        await self._request(
            "PATCH", f"/api/cart/items/{_segment(item_id)}", json={"quantity": quantity}
        )
        logger.info("Cart item %s quantity set to %s", sanitize_id_for_logging(item_id), quantity)

    async def remove_cart_item(self, item_id: str) -> None:
        await self._request("DELETE", f"/api/cart/items/{_segment(item_id)}")
        logger.info("Cart item %s removed", sanitize_id_for_logging(item_id))

    async def create_checkout(self) -> CheckoutSession:
        """Create a payment session for the current cart."""
        path = "/api/checkout"
        response = await self._request("POST", path)
        session = self._parse(response, CheckoutSession, "POST", path)
        logger.info("Checkout session created: payment_id=%s", sanitize_id_for_logging(session.payment_id))
        return session

    # ==================== STORE / CATALOG ====================

    async def get_store(self, domain: str) -> Store:
        path = f"/api/store/{_segment(domain)}"
        response = await self._request("GET", path)
        return self._parse(response, Store, "GET", path)

    async def list_products(self, domain: str, featured: bool = False) -> list[Product]:
        path = f"/api/store/{_segment(domain)}/products"
        params = {"featured": "true"} if featured else None
        response = await self._request("GET", path, params=params)
        data = self._json(response, "GET", path)
        try:
            return _PRODUCT_LIST.validate_python(data)
        except ValidationError as e:
            logger.warning(
                "GET %s: invalid product list for store %s (%d errors)",
                path,
                sanitize_string_for_logging(domain),
                e.error_count(),
            )
            raise ResponseValidationError("Invalid product list payload", method="GET", url=path) from e

    async def get_product(self, domain: str, product_id: str) -> Product:
        path = f"/api/store/{_segment(domain)}/products/{_segment(product_id)}"
        response = await self._request("GET", path)
        return self._parse(response, Product, "GET", path)

    # ==================== CONTACT ====================

    async def send_contact_message(self, domain: str, message: ContactMessage) -> None:
        await self._request(
            "POST", f"/api/store/{_segment(domain)}/contact", json=message.model_dump()
        )
        logger.info("Contact message sent to store %s", sanitize_string_for_logging(domain))
