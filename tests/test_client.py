import json

import httpx
import pytest

from storefront.client import StorefrontClient
from storefront.errors import (
    ResponseStatusError,
    ResponseValidationError,
    StorefrontError,
    TransportError,
)
from storefront.models import ContactMessage

BASE_URL = "http://shop.test"


def _client_for(handler) -> StorefrontClient:
    return StorefrontClient(BASE_URL, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.mark.asyncio
async def test_get_cart_parses_payload(backend, client):
    backend.add_item("item-1", "Free Fire Diamonds", 10.1, 2, variant="100 Diamonds")

    cart = await client.get_cart()

    item = cart.items[0]
    assert item.id == "item-1"
    assert item.sub_product_name == "100 Diamonds"
    assert str(item.price) == "10.1"
    assert str(item.line_total) == "20.20"


@pytest.mark.asyncio
async def test_get_cart_null_body_is_no_cart():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"null")

    client = _client_for(handler)
    assert await client.get_cart() is None
    await client.aclose()


@pytest.mark.asyncio
async def test_get_cart_404_is_no_cart(backend, client):
    backend.cart_missing = True
    assert await client.get_cart() is None


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [400, 401, 403, 409, 500, 503])
async def test_non_2xx_raises_status_error(backend, client, status):
    backend.fail("POST", "/api/checkout", status)

    with pytest.raises(ResponseStatusError) as exc_info:
        await client.create_checkout()

    assert exc_info.value.status_code == status
    assert exc_info.value.method == "POST"
    assert isinstance(exc_info.value, StorefrontError)


@pytest.mark.asyncio
async def test_network_error_raises_transport_error(backend, client):
    backend.disconnect("GET", "/api/cart")

    with pytest.raises(TransportError):
        await client.get_cart()


@pytest.mark.asyncio
async def test_non_json_body_raises_validation_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    client = _client_for(handler)
    with pytest.raises(ResponseValidationError):
        await client.get_store("topup")
    await client.aclose()


@pytest.mark.asyncio
async def test_schema_mismatch_raises_validation_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": "not-a-list", "total": 1})

    client = _client_for(handler)
    with pytest.raises(ResponseValidationError):
        await client.get_cart()
    await client.aclose()


@pytest.mark.asyncio
async def test_update_cart_item_sends_quantity(backend, client):
    backend.add_item("item-1", "Free Fire Diamonds", 10, 1)

    await client.update_cart_item("item-1", 3)

    request = backend.requests[-1]
    assert request.method == "PATCH"
    assert str(request.url) == f"{BASE_URL}/api/cart/items/item-1"
    assert json.loads(request.content) == {"quantity": 3}
    assert request.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_list_products_featured_query(seeded_backend, client):
    products = await client.list_products("topup", featured=True)

    assert [p.id for p in products] == ["prod-ff"]
    assert seeded_backend.requests[-1].url.params["featured"] == "true"


@pytest.mark.asyncio
async def test_list_products_rejects_non_list():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"products": []})

    client = _client_for(handler)
    with pytest.raises(ResponseValidationError):
        await client.list_products("topup")
    await client.aclose()


@pytest.mark.asyncio
async def test_send_contact_message(seeded_backend, client):
    message = ContactMessage(name="Rafi", email="rafi@example.com", subject="Order", message="Where is it?")

    await client.send_contact_message("topup", message)

    assert seeded_backend.contact_messages == [
        ("topup", {"name": "Rafi", "email": "rafi@example.com", "subject": "Order", "message": "Where is it?"})
    ]


@pytest.mark.asyncio
async def test_default_client_uses_cookies_and_env(monkeypatch):
    monkeypatch.setenv("STOREFRONT_API_URL", "shop.example.com/")
    monkeypatch.setenv("STOREFRONT_TIMEOUT", "3.5")

    client = StorefrontClient(cookies={"session": "abc"})
    http_client = await client._get_http_client()

    assert client.base_url == "https://shop.example.com"
    assert client.timeout == 3.5
    assert http_client.cookies.get("session") == "abc"
    assert http_client.headers["accept"] == "application/json"

    async with client:
        pass
    assert client._http_client is None
