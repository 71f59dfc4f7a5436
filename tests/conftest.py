"""Pytest configuration and fixtures"""
import json
import os
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import unquote

import httpx
import pytest

# Set test environment variables
os.environ.setdefault("STOREFRONT_API_URL", "http://shop.test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from storefront.cart import CartBadgeStore, CartViewModel  # noqa: E402
from storefront.client import StorefrontClient  # noqa: E402
from storefront.navigation import Navigator  # noqa: E402
from storefront.notifications import Notifier  # noqa: E402

BASE_URL = "http://shop.test"


class FakeBackend:
    """In-memory storefront backend served through httpx.MockTransport.

    The cart total is computed server-side from price * quantity unless
    `fixed_total` is set, which lets tests report a total that differs
    from the line sum.
    """

    def __init__(self):
        self.items: List[Dict[str, Any]] = []
        self.fixed_total: Optional[float] = None
        self.cart_missing = False
        self.stores: Dict[str, Dict[str, Any]] = {}
        self.products: Dict[str, List[Dict[str, Any]]] = {}
        self.checkout_response: Dict[str, Any] = {
            "paymentId": "pay-001",
            "bkashURL": "https://payment.bkash.test/checkout?paymentID=pay-001",
        }
        self.contact_messages: List[Tuple[str, Dict[str, Any]]] = []
        self.requests: List[httpx.Request] = []
        self.failures: Dict[Tuple[str, str], int] = {}
        self.network_down: set = set()

    # ---- test helpers ----

    def add_item(self, item_id: str, title: str, price: float, quantity: int, variant: str = "Basic"):
        self.items.append(
            {
                "_id": item_id,
                "product": {"title": title, "imageUrl": f"https://img.test/{item_id}.png"},
                "subProductName": variant,
                "price": price,
                "quantity": quantity,
            }
        )

    def fail(self, method: str, path: str, status: int = 500):
        self.failures[(method, path)] = status

    def disconnect(self, method: str, path: str):
        self.network_down.add((method, path))

    def count(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    @property
    def total(self) -> float:
        if self.fixed_total is not None:
            return self.fixed_total
        return sum(i["price"] * i["quantity"] for i in self.items)

    # ---- transport ----

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method, path = request.method, request.url.path

        if (method, path) in self.network_down:
            raise httpx.ConnectError("connection refused", request=request)
        if (method, path) in self.failures:
            return httpx.Response(self.failures[(method, path)], json={"error": "boom"})

        if path == "/api/cart" and method == "GET":
            if self.cart_missing:
                return httpx.Response(404, json={"error": "Cart not found"})
            return httpx.Response(200, json={"items": self.items, "total": self.total})

        if path.startswith("/api/cart/items/"):
            item_id = unquote(request.url.raw_path.decode().split("?")[0].rsplit("/", 1)[-1])
            item = next((i for i in self.items if i["_id"] == item_id), None)
            if item is None:
                return httpx.Response(404, json={"error": "Item not found"})
            if method == "PATCH":
                item["quantity"] = json.loads(request.content)["quantity"]
                return httpx.Response(200, json={"success": True})
            if method == "DELETE":
                self.items.remove(item)
                return httpx.Response(200, json={"success": True})

        if path == "/api/checkout" and method == "POST":
            return httpx.Response(200, json=self.checkout_response)

        if path.startswith("/api/store/"):
            return self._store_handler(request, path.split("/")[3:])

        return httpx.Response(404, json={"error": "Not found"})

    def _store_handler(self, request: httpx.Request, parts: List[str]) -> httpx.Response:
        domain = parts[0]
        if domain not in self.stores:
            return httpx.Response(404, json={"error": "Store not found"})
        if len(parts) == 1:
            return httpx.Response(200, json=self.stores[domain])
        products = self.products.get(domain, [])
        if parts[1] == "products" and len(parts) == 2:
            if request.url.params.get("featured") == "true":
                products = [p for p in products if p.get("featured")]
            return httpx.Response(200, json=products)
        if parts[1] == "products" and len(parts) == 3:
            product = next((p for p in products if p["_id"] == parts[2]), None)
            if product is None:
                return httpx.Response(404, json={"error": "Product not found"})
            return httpx.Response(200, json=product)
        if parts[1] == "contact" and request.method == "POST":
            self.contact_messages.append((domain, json.loads(request.content)))
            return httpx.Response(201, json={"success": True})
        return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(backend) -> StorefrontClient:
    """StorefrontClient wired to the fake backend"""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))
    return StorefrontClient(BASE_URL, http_client=http_client)


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture
def badge_store() -> CartBadgeStore:
    return CartBadgeStore()


@pytest.fixture
def cart_vm(client, notifier, navigator, badge_store) -> CartViewModel:
    return CartViewModel(client, notifier=notifier, navigator=navigator, badge_store=badge_store)


@pytest.fixture
def sample_store() -> Dict[str, Any]:
    """Sample store data"""
    return {
        "name": "Game Top-Up BD",
        "description": "Instant game credits",
        "logo": None,
        "banner": "https://img.test/banner.png",
        "theme": {"primaryColor": "#e11d48", "backgroundColor": "#ffffff"},
        "businessInfo": {"phone": "+8801700000000", "email": "help@topup.test", "address": None},
        "ownerId": "ignored-field",
    }


@pytest.fixture
def sample_products() -> List[Dict[str, Any]]:
    """Sample product list"""
    return [
        {
            "_id": "prod-ff",
            "title": "Free Fire Diamonds",
            "description": "Top up diamonds by player ID",
            "imageUrl": "https://img.test/ff.png",
            "region": "Bangladesh",
            "category": "game_top_up",
            "instantDelivery": True,
            "featured": True,
            "subProducts": [
                {"name": "100 Diamonds", "price": 1.5, "originalPrice": 2.0, "inStock": True},
                {"name": "500 Diamonds", "price": 6.99, "inStock": False},
                {"name": "1000 Diamonds", "price": 12.0, "inStock": True},
            ],
            "importantNote": "Double-check your player ID",
            "guide": "Enter your player ID at checkout",
            "guideEnabled": True,
        },
        {
            "_id": "prod-netflix",
            "title": "Netflix Gift Card",
            "description": "Streaming subscription",
            "imageUrl": "https://img.test/nf.png",
            "region": "Global",
            "category": "gift_card",
            "instantDelivery": False,
            "featured": False,
            "subProducts": [
                {"name": "1 Month", "price": 9.99, "inStock": False},
            ],
        },
    ]


@pytest.fixture
def seeded_backend(backend, sample_store, sample_products) -> FakeBackend:
    backend.stores["topup"] = sample_store
    backend.products["topup"] = sample_products
    return backend
