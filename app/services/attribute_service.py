import logging
from typing import Any

from app.core.config import settings
from app.services.woocommerce import WooCommerceClient


logger = logging.getLogger(__name__)


def _terms_endpoint(attribute_id: int) -> str:
    return f"/products/attributes/{attribute_id}/terms"


async def list_countries(client: WooCommerceClient) -> list[dict[str, Any]]:
    countries = await client.paginate(_terms_endpoint(settings.WC_COUNTRY_ATTRIBUTE_ID))
    logger.info("Fetched countries", extra={"count": len(countries)})
    return countries


async def list_qualities(client: WooCommerceClient) -> list[dict[str, Any]]:
    return await client.get(_terms_endpoint(settings.WC_QUALITY_ATTRIBUTE_ID), {"per_page": 100})


async def list_years(client: WooCommerceClient) -> list[dict[str, Any]]:
    return await client.get(_terms_endpoint(settings.WC_YEAR_ATTRIBUTE_ID), {"per_page": 100})


async def list_categories(client: WooCommerceClient) -> list[dict[str, Any]]:
    return await client.get("/products/categories", {"per_page": 100})


async def list_product_attributes(client: WooCommerceClient) -> list[dict[str, Any]]:
    """Attribute definitions, trimmed to id/name/slug."""
    attributes = await client.get("/products/attributes")
    return [{"id": a.get("id"), "name": a.get("name"), "slug": a.get("slug")} for a in attributes]
