# tests/test_woocommerce_client.py
import base64

import httpx
import pytest

from app.services.exceptions import ConfigurationError, UpstreamError
from app.services.woocommerce import WooCommerceClient


@pytest.mark.asyncio
async def test_get_uses_basic_auth_and_api_base(woo_client, shop):
    shop.on("GET", "/products/categories", json=[{"id": 1, "name": "Coins"}])

    data = await woo_client.get("/products/categories", {"per_page": 100})

    assert data == [{"id": 1, "name": "Coins"}]
    request = shop.calls[0]
    assert str(request.url) == "https://shop.test/wp-json/wc/v3/products/categories?per_page=100"
    expected = base64.b64encode(b"ck_test:cs_test").decode()
    assert request.headers["authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_error_status_raises_upstream_error_with_body(woo_client, shop):
    shop.on("GET", "/products", json={"code": "woocommerce_rest_cannot_view"}, status=401)

    with pytest.raises(UpstreamError) as exc_info:
        await woo_client.get("/products")

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail.startswith("WooCommerce API Error (401): ")
    assert "woocommerce_rest_cannot_view" in exc_info.value.detail


@pytest.mark.asyncio
async def test_transport_failure_becomes_upstream_error():
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = WooCommerceClient(transport=httpx.MockTransport(boom))
    try:
        with pytest.raises(UpstreamError) as exc_info:
            await client.get("/products")
    finally:
        await client.aclose()
    assert "connection refused" in exc_info.value.detail


@pytest.mark.asyncio
async def test_missing_credentials_fail_before_any_request(unconfigured_client, shop):
    with pytest.raises(ConfigurationError):
        await unconfigured_client.get("/products")
    assert shop.calls == []


@pytest.mark.asyncio
async def test_request_with_headers_exposes_totals(woo_client, shop):
    shop.on("GET", "/products", json=[], headers={"X-WP-Total": "42"})

    data, headers = await woo_client.request_with_headers("GET", "/products", params={"per_page": 1})

    assert data == []
    assert headers["x-wp-total"] == "42"


@pytest.mark.asyncio
async def test_paginate_stops_on_short_page(woo_client, shop):
    items = [{"id": i} for i in range(1, 26)]
    shop.paged("/products/attributes/6/terms", items)

    result = await woo_client.paginate("/products/attributes/6/terms", page_size=10)

    assert [item["id"] for item in result] == list(range(1, 26))
    pages = [r.url.params["page"] for r in shop.calls]
    assert pages == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_paginate_stops_on_empty_page(woo_client, shop):
    shop.paged("/products", [{"id": i} for i in range(1, 11)])

    result = await woo_client.paginate("/products", page_size=5)

    assert len(result) == 10
    # pagina 3 vuelve vacía
    assert len(shop.calls) == 3


@pytest.mark.asyncio
async def test_paginate_keeps_extra_params(woo_client, shop):
    shop.paged("/products", [{"id": 1}])

    await woo_client.paginate("/products", {"status": "private"})

    params = shop.calls[0].url.params
    assert params["status"] == "private"
    assert params["per_page"] == "100"
    assert params["page"] == "1"


@pytest.mark.asyncio
async def test_paginate_tolerates_failing_page(woo_client, shop):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params["page"] == "1":
            return httpx.Response(200, json=[{"id": 1}, {"id": 2}])
        return httpx.Response(500, text="db down")

    shop.on("GET", "/products", handler)

    result = await woo_client.paginate("/products", page_size=2, tolerate_errors=True)
    assert result == [{"id": 1}, {"id": 2}]

    with pytest.raises(UpstreamError):
        await woo_client.paginate("/products", page_size=2)


@pytest.mark.asyncio
async def test_upload_file_posts_multipart_without_auth(woo_client, shop):
    shop.on("POST", "/wp-json/custom/v1/upload-image", json={"id": 7, "url": "https://shop.test/front.jpg"})

    data = await woo_client.upload_file("front.jpg", b"\xff\xd8jpeg", "image/jpeg")

    assert data == {"id": 7, "url": "https://shop.test/front.jpg"}
    request = shop.calls[0]
    assert "authorization" not in request.headers
    assert request.headers["content-type"].startswith("multipart/form-data")
    assert b'filename="front.jpg"' in request.content


@pytest.mark.asyncio
async def test_upload_file_failure(woo_client, shop):
    shop.on("POST", "/wp-json/custom/v1/upload-image", lambda r: httpx.Response(500, text="disk full"))

    with pytest.raises(UpstreamError) as exc_info:
        await woo_client.upload_file("front.jpg", b"data", None)
    assert exc_info.value.detail == "Upload failed: disk full"


@pytest.mark.asyncio
async def test_html_in_success_response_becomes_upstream_error(woo_client, shop):
    shop.on("GET", "/products", lambda r: httpx.Response(200, text="<html>PHP Warning</html>"))

    with pytest.raises(UpstreamError) as exc_info:
        await woo_client.get("/products")

    assert exc_info.value.detail == "WooCommerce API Error (200): invalid JSON"
    assert exc_info.value.status_code == 200
    assert exc_info.value.body == "<html>PHP Warning</html>"


@pytest.mark.asyncio
async def test_upload_file_with_html_response(woo_client, shop):
    shop.on("POST", "/wp-json/custom/v1/upload-image", lambda r: httpx.Response(200, text="<br />Notice"))

    with pytest.raises(UpstreamError) as exc_info:
        await woo_client.upload_file("front.jpg", b"data", "image/jpeg")
    assert exc_info.value.detail == "Upload failed (200): invalid JSON"
