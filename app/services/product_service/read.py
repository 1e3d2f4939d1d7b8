import logging
from typing import Any

from app.core.config import settings
from app.services.exceptions import DomainValidationError, UpstreamError
from app.services.product_cache import ProductCache, get_all_products
from app.services.woocommerce import WooCommerceClient
from .utils import classify_kind, matches_country, matches_type, status_for_type


logger = logging.getLogger(__name__)

PRIVATE_DEFAULT_PER_PAGE = 100


def _require_country(country_slug: str | None) -> str:
    if not country_slug:
        raise DomainValidationError("Country parameter is required")
    return country_slug


def _parse_int(raw: str | int | None, default: int) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return value or default


async def _country_term_id(client: WooCommerceClient, country_slug: str) -> int | None:
    try:
        terms = await client.get(
            f"/products/attributes/{settings.WC_COUNTRY_ATTRIBUTE_ID}/terms",
            {"slug": country_slug},
        )
    except UpstreamError:
        logger.error("Failed to fetch country term", extra={"country": country_slug})
        return None

    if not terms:
        logger.info("No term found for country", extra={"country": country_slug})
        return None
    return terms[0]["id"]


async def list_products_by_country(
    client: WooCommerceClient,
    country_slug: str | None,
    product_type: str | None = None,
) -> list[dict[str, Any]]:
    """Products tagged with the country term, filtered by WooCommerce itself."""
    country_slug = _require_country(country_slug)
    term_id = await _country_term_id(client, country_slug)
    if term_id is None:
        return []

    params: dict[str, Any] = {
        "attribute": "pa_country",
        "attribute_term": term_id,
        "per_page": PRIVATE_DEFAULT_PER_PAGE,
    }
    status = status_for_type(product_type)
    if status:
        params["status"] = status

    try:
        products = await client.get("/products", params)
    except UpstreamError:
        logger.error("Failed to fetch products", extra={"country": country_slug, "term_id": term_id})
        return []

    logger.info(
        "Fetched products for country",
        extra={"country": country_slug, "count": len(products), "status": status or "all"},
    )
    return products


async def list_products_by_country_type(
    client: WooCommerceClient,
    cache: ProductCache,
    country_slug: str | None,
    product_type: str | None = None,
) -> list[dict[str, Any]]:
    """Same question as :func:`list_products_by_country`, answered from the cached full list."""
    country_slug = _require_country(country_slug)
    products = await get_all_products(client, cache)
    filtered = [
        product
        for product in products
        if matches_country(product, country_slug) and matches_type(product, product_type)
    ]
    logger.info(
        "Filtered products for country",
        extra={"country": country_slug, "type": product_type or "all", "count": len(filtered)},
    )
    return filtered


def _status_from_type(product_type: str | None) -> str:
    if not product_type:
        raise DomainValidationError("Type parameter required")
    return "publish" if product_type == "public" else "private"


async def count_products_by_type(client: WooCommerceClient, product_type: str | None) -> int:
    status = _status_from_type(product_type)
    client.ensure_configured()
    try:
        _, headers = await client.request_with_headers(
            "GET", "/products", params={"status": status, "per_page": 1}
        )
    except UpstreamError:
        logger.exception("Failed to count products", extra={"status": status})
        return 0
    return _parse_int(headers.get("x-wp-total"), 0)


async def list_products_by_type(client: WooCommerceClient, product_type: str | None) -> list[dict[str, Any]]:
    status = _status_from_type(product_type)
    client.ensure_configured()
    try:
        return await client.paginate("/products", {"status": status})
    except UpstreamError:
        logger.exception("Failed to list products", extra={"status": status})
        return []


async def count_private_by_kind(client: WooCommerceClient) -> dict[str, int]:
    """Coins and banknotes among private products; a product naming both counts as a coin."""
    client.ensure_configured()
    counts = {"coins": 0, "banknotes": 0}
    try:
        products = await client.paginate("/products", {"status": "private"})
    except UpstreamError:
        logger.exception("Failed to load private products for category counts")
        return counts

    for product in products:
        kind = classify_kind(product)
        if kind == "coin":
            counts["coins"] += 1
        elif kind == "banknote":
            counts["banknotes"] += 1
    return counts


def clamp_private_paging(page: str | int | None, per_page: str | int | None) -> tuple[int, int]:
    page_value = max(_parse_int(page, 1), 1)
    per_page_value = min(max(_parse_int(per_page, PRIVATE_DEFAULT_PER_PAGE), 10), 100)
    return page_value, per_page_value


async def list_private_products(
    client: WooCommerceClient,
    status: str | None = None,
    page: str | int | None = None,
    per_page: str | int | None = None,
) -> list[dict[str, Any]]:
    """One page of products with the given status (``private`` by default)."""
    status = status or "private"
    page_value, per_page_value = clamp_private_paging(page, per_page)
    products = await client.get(
        "/products",
        {"status": status, "per_page": per_page_value, "page": page_value},
    )
    logger.info(
        "Fetched products page",
        extra={"status": status, "count": len(products), "page": page_value, "per_page": per_page_value},
    )
    return products
