from __future__ import annotations

from typing import Any, Iterable

from app.core.config import settings
from app.utils.slugify import slugify

COUNTRY_SLUG = "pa_country"

# display names WooCommerce shows for the managed attributes
COUNTRY_LABEL = "Country"
QUALITY_LABEL = "Quality"
YEAR_LABEL = "Issue Year"

STATUS_BY_TYPE = {"public": "publish", "private": "private"}


def status_for_type(product_type: str | None) -> str | None:
    """Map the dashboard's public/private vocabulary to a WooCommerce status."""
    return STATUS_BY_TYPE.get(product_type or "")


def attribute_entry(attribute_id: int, name: str, value: str) -> dict[str, Any]:
    return {"id": attribute_id, "name": name, "visible": True, "options": [value]}


def build_attributes(country: str | None, quality: str | None, year: str | None) -> list[dict[str, Any]]:
    """Country, Quality and Issue Year entries for the values that are set."""
    attributes: list[dict[str, Any]] = []
    if country:
        attributes.append(attribute_entry(settings.WC_COUNTRY_ATTRIBUTE_ID, COUNTRY_LABEL, country))
    if quality:
        attributes.append(attribute_entry(settings.WC_QUALITY_ATTRIBUTE_ID, QUALITY_LABEL, quality))
    if year:
        attributes.append(attribute_entry(settings.WC_YEAR_ATTRIBUTE_ID, YEAR_LABEL, year))
    return attributes


def find_country_attribute(product: dict[str, Any]) -> dict[str, Any] | None:
    for attr in product.get("attributes") or []:
        name = str(attr.get("name") or "").lower()
        if name == "country" or attr.get("slug") == COUNTRY_SLUG or attr.get("id") == settings.WC_COUNTRY_ATTRIBUTE_ID:
            return attr
    return None


def matches_country(product: dict[str, Any], country_slug: str) -> bool:
    attr = find_country_attribute(product)
    if not attr or not attr.get("options"):
        return False
    target = country_slug.lower()
    return any(slugify(option) == target for option in attr["options"])


def matches_type(product: dict[str, Any], product_type: str | None) -> bool:
    status = status_for_type(product_type)
    if status is None:
        return True
    return product.get("status") == status


def _names(values: Iterable[Any]) -> list[str]:
    return [str((value or {}).get("name") or "").lower() for value in values]


def classify_kind(product: dict[str, Any]) -> str | None:
    """Return ``"coin"``, ``"banknote"`` or None from category and product names."""
    categories = _names(product.get("categories") or [])
    name = str(product.get("name") or "").lower()

    def mentions(*words: str) -> bool:
        return any(word in category for category in categories for word in words) or any(
            word in name for word in words
        )

    if mentions("coin", "monnaie"):
        return "coin"
    if mentions("banknote", "billet"):
        return "banknote"
    return None
