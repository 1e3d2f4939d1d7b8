# tests/test_products.py
import json

import httpx
import pytest
from httpx import AsyncClient

from app.api.deps import get_woo_client
from app.main import app


async def _prime(cache):
    async def loader():
        return [{"id": 1}]

    await cache.get_all(loader)
    assert cache.status().is_cached is True


# ---------- by-country ----------
@pytest.mark.asyncio
async def test_by_country_filters_by_term(client: AsyncClient, shop, product_factory):
    product = product_factory(5, "10 Francs", status="private", country="France")
    shop.on("GET", "/products/attributes/6/terms", json=[{"id": 42, "slug": "france"}])
    shop.on("GET", "/products", json=[product])

    resp = await client.get("/api/products/by-country", params={"country": "france", "type": "private"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"products": [product], "countryName": "france"}
    assert resp.headers["cache-control"] == "public, s-maxage=300, stale-while-revalidate=600"

    params = shop.requests_to("GET", "/products")[0].url.params
    assert params["attribute"] == "pa_country"
    assert params["attribute_term"] == "42"
    assert params["status"] == "private"
    assert params["per_page"] == "100"
    assert shop.requests_to("GET", "/products/attributes/6/terms")[0].url.params["slug"] == "france"


@pytest.mark.asyncio
async def test_by_country_without_type_has_no_status(client: AsyncClient, shop):
    shop.on("GET", "/products/attributes/6/terms", json=[{"id": 42}])
    shop.on("GET", "/products", json=[])

    resp = await client.get("/api/products/by-country", params={"country": "france"})

    assert resp.status_code == 200
    assert "status" not in shop.requests_to("GET", "/products")[0].url.params


@pytest.mark.asyncio
async def test_by_country_unknown_term_returns_empty(client: AsyncClient, shop):
    shop.on("GET", "/products/attributes/6/terms", json=[])

    resp = await client.get("/api/products/by-country", params={"country": "atlantis"})

    assert resp.status_code == 200
    assert resp.json()["products"] == []
    assert shop.requests_to("GET", "/products") == []


@pytest.mark.asyncio
async def test_by_country_upstream_failure_returns_empty(client: AsyncClient, shop):
    shop.on("GET", "/products/attributes/6/terms", json=[{"id": 42}])
    shop.on("GET", "/products", json={"code": "boom"}, status=500)

    resp = await client.get("/api/products/by-country", params={"country": "france"})

    assert resp.status_code == 200
    assert resp.json()["products"] == []


@pytest.mark.asyncio
async def test_by_country_requires_country(client: AsyncClient):
    resp = await client.get("/api/products/by-country")
    assert resp.status_code == 400
    assert resp.json() == {"error": "Country parameter is required"}


# ---------- by-country-type ----------
@pytest.mark.asyncio
async def test_by_country_type_uses_cached_catalogue(client: AsyncClient, shop, product_factory):
    shop.paged(
        "/products",
        [
            product_factory(1, "1 Franc", status="publish", country="France"),
            product_factory(2, "10 Francs", status="private", country="France"),
            product_factory(3, "1 Dollar", status="private", country="United States"),
            product_factory(4, "No country", status="private"),
        ],
    )

    resp = await client.get("/api/products/by-country-type", params={"country": "united-states", "type": "private"})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["countryName"] == "united-states"
    assert [p["id"] for p in body["products"]] == [3]

    resp = await client.get("/api/products/by-country-type", params={"country": "france"})
    assert [p["id"] for p in resp.json()["products"]] == [1, 2]

    resp = await client.get("/api/products/by-country-type", params={"country": "france", "type": "public"})
    assert [p["id"] for p in resp.json()["products"]] == [1]

    assert len(shop.requests_to("GET", "/products")) == 1


# ---------- by-type ----------
@pytest.mark.asyncio
async def test_by_type_count_reads_total_header(client: AsyncClient, shop):
    def handler(request: httpx.Request) -> httpx.Response:
        total = "37" if request.url.params["status"] == "publish" else "12"
        return httpx.Response(200, json=[], headers={"X-WP-Total": total})

    shop.on("GET", "/products", handler)

    resp = await client.get("/api/products/by-type", params={"type": "public", "count": "true"})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"count": 37}
    assert resp.headers["cache-control"] == "public, s-maxage=120, stale-while-revalidate=300"
    assert shop.calls[-1].url.params["per_page"] == "1"

    resp = await client.get("/api/products/by-type", params={"type": "private", "count": "true"})
    assert resp.json() == {"count": 12}


@pytest.mark.asyncio
async def test_by_type_requires_type(client: AsyncClient):
    resp = await client.get("/api/products/by-type", params={"count": "true"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Type parameter required"}


@pytest.mark.asyncio
async def test_by_type_lists_every_page(client: AsyncClient, shop, product_factory):
    shop.paged("/products", [product_factory(i, f"note {i}", status="publish") for i in range(1, 4)])

    resp = await client.get("/api/products/by-type", params={"type": "public"})

    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == [1, 2, 3]
    assert shop.calls[0].url.params["status"] == "publish"


@pytest.mark.asyncio
async def test_by_type_category_counts(client: AsyncClient, shop, product_factory):
    shop.paged(
        "/products",
        [
            product_factory(1, "1 franc", categories=["Coins"]),
            product_factory(2, "Monnaie 5 francs"),
            product_factory(3, "Billet 100 francs"),
            product_factory(4, "10 dollars", categories=["Banknotes"]),
            product_factory(5, "Coin and banknote set"),
            product_factory(6, "Medal"),
        ],
    )

    resp = await client.get("/api/products/by-type", params={"categories": "true"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"coins": 3, "banknotes": 2}
    assert shop.calls[0].url.params["status"] == "private"


@pytest.mark.asyncio
async def test_by_type_without_credentials(client: AsyncClient, unconfigured_client):
    app.dependency_overrides[get_woo_client] = lambda: unconfigured_client

    resp = await client.get("/api/products/by-type", params={"type": "public", "count": "true"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "WooCommerce credentials are not configured"}


@pytest.mark.asyncio
async def test_by_type_falls_back_on_invalid_json(client: AsyncClient, shop):
    shop.on("GET", "/products", lambda r: httpx.Response(200, text="<html>PHP Warning</html>"))

    listed = await client.get("/api/products/by-type", params={"type": "public"})
    counted = await client.get("/api/products/by-type", params={"type": "public", "count": "true"})
    split = await client.get("/api/products/by-type", params={"categories": "true"})

    assert listed.status_code == 200
    assert listed.json() == []
    assert counted.json() == {"count": 0}
    assert split.json() == {"coins": 0, "banknotes": 0}


# ---------- private ----------
@pytest.mark.asyncio
async def test_private_defaults(client: AsyncClient, shop):
    shop.on("GET", "/products", json=[{"id": 1}])

    resp = await client.get("/api/products/private")

    assert resp.status_code == 200
    assert resp.json() == [{"id": 1}]
    params = shop.calls[0].url.params
    assert params["status"] == "private"
    assert params["page"] == "1"
    assert params["per_page"] == "100"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "query, expected_page, expected_per_page",
    [
        ({"page": "0", "per_page": "5"}, "1", "10"),
        ({"page": "3", "per_page": "500"}, "3", "100"),
        ({"page": "abc", "per_page": "xyz"}, "1", "100"),
        ({"page": "-2", "per_page": "25"}, "1", "25"),
    ],
)
async def test_private_clamps_paging(client: AsyncClient, shop, query, expected_page, expected_per_page):
    shop.on("GET", "/products", json=[])

    resp = await client.get("/api/products/private", params=query)

    assert resp.status_code == 200
    params = shop.calls[0].url.params
    assert params["page"] == expected_page
    assert params["per_page"] == expected_per_page


@pytest.mark.asyncio
async def test_private_accepts_other_status(client: AsyncClient, shop):
    shop.on("GET", "/products", json=[])
    await client.get("/api/products/private", params={"status": "draft"})
    assert shop.calls[0].url.params["status"] == "draft"


# ---------- create ----------
@pytest.mark.asyncio
async def test_create_product_payload(client: AsyncClient, shop, product_cache):
    await _prime(product_cache)
    shop.on("POST", "/products", json={"id": 99, "name": "10 Francs"}, status=201)

    resp = await client.post(
        "/api/products/create",
        json={"name": "10 Francs", "country": "France", "quality": "UNC", "year": 1990, "imageIds": [11, 12]},
    )

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"success": True, "product": {"id": 99, "name": "10 Francs"}}

    sent = json.loads(shop.calls[0].content)
    assert sent == {
        "name": "10 Francs",
        "type": "simple",
        "status": "private",
        "regular_price": "0",
        "attributes": [
            {"id": 6, "name": "Country", "visible": True, "options": ["France"]},
            {"id": 8, "name": "Quality", "visible": True, "options": ["UNC"]},
            {"id": 7, "name": "Issue Year", "visible": True, "options": ["1990"]},
        ],
        "images": [{"id": 11, "position": 0}, {"id": 12, "position": 1}],
    }
    assert product_cache.status().is_cached is False


@pytest.mark.asyncio
async def test_create_without_images_omits_them(client: AsyncClient, shop):
    shop.on("POST", "/products", json={"id": 100})

    resp = await client.post("/api/products/create", json={"name": "5 Lei", "status": "publish"})

    assert resp.status_code == 200
    sent = json.loads(shop.calls[0].content)
    assert "images" not in sent
    assert sent["attributes"] == []
    assert sent["status"] == "publish"


@pytest.mark.asyncio
async def test_create_requires_name(client: AsyncClient, shop):
    resp = await client.post("/api/products/create", json={"name": "   ", "country": "France"})

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Product name is required"}
    assert shop.calls == []


@pytest.mark.asyncio
async def test_create_upstream_error(client: AsyncClient, shop):
    shop.on("POST", "/products", json={"code": "woocommerce_rest_invalid"}, status=400)

    resp = await client.post("/api/products/create", json={"name": "10 Francs"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["error"].startswith("WooCommerce API Error (400): ")


# ---------- update ----------
@pytest.mark.asyncio
async def test_update_product_payload(client: AsyncClient, shop, product_cache):
    await _prime(product_cache)
    shop.on("PUT", "/products/99", json={"id": 99, "regular_price": "12.5"})

    resp = await client.put(
        "/api/products/update",
        json={
            "id": 99,
            "name": "10 Francs 1990",
            "price": 12.5,
            "category": "Banknotes",
            "year": "1990",
            "images": [{"id": 11, "position": 0}, {"id": 12, "position": 1}],
        },
    )

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"success": True, "product": {"id": 99, "regular_price": "12.5"}}
    sent = json.loads(shop.calls[0].content)
    assert sent == {
        "name": "10 Francs 1990",
        "regular_price": "12.5",
        "categories": [{"name": "Banknotes"}],
        "attributes": [{"id": 7, "name": "Issue Year", "visible": True, "options": ["1990"]}],
        "images": [{"id": 11, "position": 0}, {"id": 12, "position": 1}],
    }
    assert product_cache.status().is_cached is False


@pytest.mark.asyncio
async def test_update_numeric_prices(client: AsyncClient, shop):
    shop.on("PUT", "/products/99", json={"id": 99})

    await client.put("/api/products/update", json={"id": 99, "name": "5 Francs", "price": 0})
    await client.put("/api/products/update", json={"id": 99, "price": 12.0})

    zero, whole = (json.loads(r.content) for r in shop.calls)
    # precio 0 no se envía
    assert zero == {"name": "5 Francs"}
    assert whole == {"regular_price": "12"}


@pytest.mark.asyncio
async def test_update_requires_id(client: AsyncClient, shop):
    resp = await client.put("/api/products/update", json={"name": "x"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Product ID is required"}
    assert shop.calls == []


@pytest.mark.asyncio
async def test_update_upstream_error(client: AsyncClient, shop):
    shop.on("PUT", "/products/99", json={"code": "woocommerce_rest_product_invalid_id"}, status=404)

    resp = await client.put("/api/products/update", json={"id": 99, "name": "x"})

    assert resp.status_code == 500
    assert resp.json()["error"].startswith("WooCommerce API Error (404): ")


# ---------- delete ----------
@pytest.mark.asyncio
async def test_delete_product_forces(client: AsyncClient, shop, product_cache):
    await _prime(product_cache)
    shop.on("DELETE", "/products/99", json={"id": 99, "name": "10 Francs"})

    resp = await client.delete("/api/products/delete", params={"id": "99"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {
        "success": True,
        "product": {"id": 99, "name": "10 Francs"},
        "message": "Product deleted successfully",
    }
    assert shop.calls[0].url.params["force"] == "true"
    assert product_cache.status().is_cached is False


@pytest.mark.asyncio
async def test_delete_requires_id(client: AsyncClient, shop):
    resp = await client.delete("/api/products/delete")

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Product ID is required"}
    assert shop.calls == []
