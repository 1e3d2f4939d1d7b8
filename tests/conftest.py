# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import os
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

# la configuración exige WP_URL, se define antes de importar la app
os.environ.setdefault("WP_URL", "https://shop.test")
os.environ.setdefault("WC_CONSUMER_KEY", "ck_test")
os.environ.setdefault("WC_CONSUMER_SECRET", "cs_test")

from app.api.deps import get_missing_store, get_product_cache, get_woo_client
from app.core.config import Settings
from app.main import app
from app.services.missing_products import MissingProductsStore
from app.services.product_cache import ProductCache
from app.services.woocommerce import WooCommerceClient

WC_PREFIX = "/wp-json/wc/v3"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeShop:
    """Tienda WooCommerce simulada para httpx.MockTransport."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.calls: list[httpx.Request] = []

    @staticmethod
    def _path(endpoint: str) -> str:
        return endpoint if endpoint.startswith("/wp-json") else f"{WC_PREFIX}{endpoint}"

    def on(
        self,
        method: str,
        endpoint: str,
        handler: Handler | None = None,
        *,
        json: Any = None,
        status: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                return httpx.Response(status, json=json, headers=headers)
        self.routes[(method, self._path(endpoint))] = handler

    def paged(self, endpoint: str, items: list[dict[str, Any]]) -> None:
        """Responde GET paginado respetando page/per_page."""

        def handler(request: httpx.Request) -> httpx.Response:
            page = int(request.url.params.get("page", 1))
            per_page = int(request.url.params.get("per_page", 10))
            start = (page - 1) * per_page
            return httpx.Response(200, json=items[start:start + per_page])

        self.on("GET", endpoint, handler)

    def requests_to(self, method: str, endpoint: str) -> list[httpx.Request]:
        path = self._path(endpoint)
        return [r for r in self.calls if r.method == method and r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"code": "rest_no_route"})
        return handler(request)


def make_product(
    product_id: int,
    name: str,
    *,
    status: str = "private",
    country: str | None = None,
    quality: str | None = None,
    year: str | None = None,
    categories: list[str] | None = None,
    price: str = "",
    images: list[str] | None = None,
) -> dict[str, Any]:
    attributes = []
    if country:
        attributes.append({"id": 6, "name": "Country", "slug": "pa_country", "options": [country]})
    if quality:
        attributes.append({"id": 8, "name": "Quality", "slug": "pa_quality", "options": [quality]})
    if year:
        attributes.append({"id": 7, "name": "Issue Year", "slug": "pa_issue-year", "options": [year]})
    return {
        "id": product_id,
        "name": name,
        "status": status,
        "price": price,
        "regular_price": price,
        "attributes": attributes,
        "categories": [{"name": c} for c in categories or []],
        "images": [{"src": src} for src in images or []],
    }


# ---------- Fixtures ----------
@pytest.fixture
def shop() -> FakeShop:
    return FakeShop()


@pytest_asyncio.fixture
async def woo_client(shop: FakeShop):
    client = WooCommerceClient(transport=httpx.MockTransport(shop))
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def unconfigured_client(shop: FakeShop):
    config = Settings(WP_URL="https://shop.test", WC_CONSUMER_KEY="", WC_CONSUMER_SECRET="")
    client = WooCommerceClient(config, transport=httpx.MockTransport(shop))
    yield client
    await client.aclose()


@pytest.fixture
def product_cache() -> ProductCache:
    return ProductCache(ttl_seconds=300)


@pytest.fixture
def missing_store() -> MissingProductsStore:
    return MissingProductsStore()


@pytest_asyncio.fixture
async def client(woo_client: WooCommerceClient, product_cache: ProductCache, missing_store: MissingProductsStore):
    """AsyncClient enlazado a la app con la tienda simulada inyectada."""
    app.dependency_overrides[get_woo_client] = lambda: woo_client
    app.dependency_overrides[get_product_cache] = lambda: product_cache
    app.dependency_overrides[get_missing_store] = lambda: missing_store
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def product_factory():
    return make_product
