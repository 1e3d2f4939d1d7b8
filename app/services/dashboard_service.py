"""Read models for the dashboard screens: home stats, country list, country
detail and the private collection."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping

from app.services import attribute_service, catalog, product_service
from app.services.exceptions import ServiceError
from app.services.flags import get_country_flag_emoji, get_country_flag_url
from app.services.missing_products import MissingProductsStore
from app.services.product_cache import ProductCache
from app.services.woocommerce import WooCommerceClient


logger = logging.getLogger(__name__)

ATTRIBUTE_FILTER_SLOTS = 2


async def _or_default(coro, default: Any, label: str) -> Any:
    try:
        return await coro
    except ServiceError as exc:
        logger.warning("Dashboard stat unavailable", extra={"stat": label, "error": exc.detail})
        return default


async def home_stats(client: WooCommerceClient) -> dict[str, int]:
    """Headline counters; each one falls back to zero on its own."""
    public_count, private_count, countries, kinds = await asyncio.gather(
        _or_default(product_service.count_products_by_type(client, "public"), 0, "publicProducts"),
        _or_default(product_service.count_products_by_type(client, "private"), 0, "privateProducts"),
        _or_default(attribute_service.list_countries(client), [], "countries"),
        _or_default(product_service.count_private_by_kind(client), {"coins": 0, "banknotes": 0}, "categories"),
    )
    return {
        "coins": kinds.get("coins", 0),
        "banknotes": kinds.get("banknotes", 0),
        "publicProducts": public_count,
        "privateProducts": private_count,
        "countries": len(countries) if isinstance(countries, list) else 0,
    }


async def country_list(client: WooCommerceClient, search: str = "", direction: str = "asc") -> dict[str, Any]:
    countries = await attribute_service.list_countries(client)
    filtered = catalog.filter_countries(countries, search=search, direction=direction)  # type: ignore[arg-type]
    items = [
        {
            **country,
            "flagUrl": get_country_flag_url(str(country.get("name") or "")),
            "flagEmoji": get_country_flag_emoji(str(country.get("name") or "")),
        }
        for country in filtered
    ]
    return {"total": len(countries), "matched": len(items), "countries": items}


def _product_card(product: Mapping[str, Any]) -> dict[str, Any]:
    return {
        **product,
        "displayAttributes": catalog.display_attributes(product),
        "formattedPrice": catalog.format_price(product.get("price") or product.get("regular_price")),
    }


async def country_detail(
    client: WooCommerceClient,
    cache: ProductCache,
    missing: MissingProductsStore,
    slug: str,
    *,
    tab: str = "public",
    search: str = "",
    category: str = catalog.ALL,
    attribute_filters: Mapping[str, str] | None = None,
    sort_by: str = "name",
    sort_order: str = "asc",
) -> dict[str, Any]:
    public_products, private_products = await asyncio.gather(
        product_service.list_products_by_country_type(client, cache, slug, "public"),
        product_service.list_products_by_country_type(client, cache, slug, "private"),
    )
    attribute_filters = dict(attribute_filters or {})
    current = private_products if tab == "private" else public_products

    products = catalog.filter_and_sort_products(
        current,
        search=search,
        category=category,
        attribute_filters=attribute_filters,
        sort_by=sort_by,  # type: ignore[arg-type]
        sort_order=sort_order,  # type: ignore[arg-type]
    )
    # flag names use spaces where slugs use dashes
    flag_name = slug.replace("-", " ")
    return {
        "country": slug,
        "countryName": catalog.capitalize_words(flag_name),
        "flagUrl": get_country_flag_url(flag_name, "h120"),
        "tab": tab,
        "counts": {
            "public": len(public_products),
            "private": len(private_products),
            "missing": len(missing.get(slug)),
        },
        "missing": missing.get(slug),
        "categories": catalog.available_categories(current),
        "attributeFilters": catalog.available_attributes(current)[:ATTRIBUTE_FILTER_SLOTS],
        "priceSortable": catalog.price_sortable(current),
        "yearSortable": catalog.year_sortable(current),
        "filtersActive": catalog.filters_active(search, category, attribute_filters),
        "products": [] if tab == "missing" else [_product_card(p) for p in products],
    }


async def collection(
    client: WooCommerceClient,
    *,
    status: str = "private",
    search: str = "",
    country: str = "",
    category: str = "",
    quality: str = "",
    year: str = "",
) -> dict[str, Any]:
    products = await product_service.list_private_products(client, status=status)
    filtered = catalog.filter_collection(
        products, search=search, country=country, category=category, quality=quality, year=year
    )
    return {
        "total": len(products),
        "matched": len(filtered),
        "filtersActive": any([search, country, category, quality, year]),
        "filters": catalog.collection_filter_options(products),
        "products": [{**product, "imageUrls": catalog.product_images(product)} for product in filtered],
    }
