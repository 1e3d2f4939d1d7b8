"""Filtering and sorting over in-memory WooCommerce product lists.

These are the rules the dashboard views apply to product and country lists:
free-text search on the name, exact matches on category and attribute
options, and ordering by name, price or issue year. Products are the raw
WooCommerce dicts.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Literal, Mapping

from app.utils.slugify import normalize_key

SortBy = Literal["name", "price", "year"]
SortOrder = Literal["asc", "desc"]

ALL = "all"
PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x300?text=No+Image"
COUNTRY_ATTRIBUTE_NAMES = {"country", "pays"}
YEAR_KEY = "issue year"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _leading_int(value: str) -> int:
    match = _LEADING_INT.match(value or "")
    return int(match.group(1)) if match else 0


def _leading_float(value: str) -> float:
    match = _LEADING_FLOAT.match(value or "")
    if not match:
        return 0.0
    number = float(match.group(1))
    return number if math.isfinite(number) else 0.0


def capitalize_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" ") if word)


def numeric_price(product: Mapping[str, Any]) -> float:
    return _leading_float(str(product.get("price") or product.get("regular_price") or "0"))


def format_price(value: str | None) -> str:
    """USD string for a positive price, ``"-"`` otherwise."""
    amount = _leading_float(value or "0")
    if amount <= 0:
        return "-"
    return f"${amount:,.2f}"


def _attributes(product: Mapping[str, Any]) -> list[dict[str, Any]]:
    return product.get("attributes") or []


def _first_option(attr: Mapping[str, Any] | None) -> str:
    if not attr:
        return ""
    options = attr.get("options") or []
    return options[0] if options else ""


def attribute_by_slug(product: Mapping[str, Any], slug: str) -> dict[str, Any] | None:
    return next((attr for attr in _attributes(product) if attr.get("slug") == slug), None)


def attribute_value(product: Mapping[str, Any], key: str) -> str:
    """First option of the attribute named ``key`` or whose slug derives from it."""
    normalized = normalize_key(key)
    compact = re.sub(r"\s+", "", normalized)
    wanted_slugs = {normalized, f"pa_{normalized}", compact, f"pa_{compact}"}
    for attr in _attributes(product):
        name = str(attr.get("name") or "").lower()
        slug = str(attr.get("slug") or "").lower()
        if name == key.lower() or slug in wanted_slugs:
            return _first_option(attr)
    return ""


def display_attributes(product: Mapping[str, Any]) -> dict[str, str]:
    """Attribute name to first option, country excluded."""
    attrs: dict[str, str] = {}
    for attr in _attributes(product):
        name = attr.get("name")
        if not name or name.lower() in COUNTRY_ATTRIBUTE_NAMES:
            continue
        attrs[name] = _first_option(attr) or "-"
    return attrs


def category_names(product: Mapping[str, Any]) -> list[str]:
    categories = product.get("categories")
    if not isinstance(categories, list):
        return []
    return [cat["name"] for cat in categories if isinstance(cat, dict) and cat.get("name")]


def product_images(product: Mapping[str, Any]) -> dict[str, str]:
    """Front and back image sources; the back falls back to the front."""
    images = product.get("images")
    if isinstance(images, list) and images:
        primary = images[0].get("src") or PLACEHOLDER_IMAGE
        secondary = (len(images) > 1 and images[1].get("src")) or images[0].get("src") or PLACEHOLDER_IMAGE
        return {"primary": primary, "secondary": secondary}
    return {"primary": PLACEHOLDER_IMAGE, "secondary": PLACEHOLDER_IMAGE}


# ---------- Collection view ----------

def collection_filter_options(products: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    countries: set[str] = set()
    categories: set[str] = set()
    qualities: set[str] = set()
    years: set[str] = set()

    for product in products:
        if value := _first_option(attribute_by_slug(product, "pa_country")):
            countries.add(value)
        if value := _first_option(attribute_by_slug(product, "pa_quality")):
            qualities.add(value)
        if value := _first_option(attribute_by_slug(product, "pa_issue-year")):
            years.add(value)
        categories.update(category_names(product))

    return {
        "countries": sorted(countries),
        "categories": sorted(categories),
        "qualities": sorted(qualities),
        "years": sorted(years, reverse=True),
    }


def filter_collection(
    products: Iterable[Mapping[str, Any]],
    *,
    search: str = "",
    country: str = "",
    category: str = "",
    quality: str = "",
    year: str = "",
) -> list[Mapping[str, Any]]:
    filtered = list(products)
    if search:
        term = search.lower()
        filtered = [p for p in filtered if term in str(p.get("name") or "").lower()]
    if country:
        filtered = [p for p in filtered if _first_option(attribute_by_slug(p, "pa_country")) == country]
    if category:
        filtered = [p for p in filtered if category in category_names(p)]
    if quality:
        filtered = [p for p in filtered if _first_option(attribute_by_slug(p, "pa_quality")) == quality]
    if year:
        filtered = [p for p in filtered if _first_option(attribute_by_slug(p, "pa_issue-year")) == year]
    return filtered


# ---------- Country detail view ----------

def available_categories(products: Iterable[Mapping[str, Any]]) -> list[str]:
    names: set[str] = set()
    for product in products:
        names.update(category_names(product))
    return sorted(names)


def available_attributes(products: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Filterable attributes in first-seen order, each with its sorted option values."""
    values_by_name: dict[str, set[str]] = {}
    for product in products:
        for attr in _attributes(product):
            name = attr.get("name")
            options = attr.get("options")
            if not name or not options or name.lower() in COUNTRY_ATTRIBUTE_NAMES:
                continue
            values_by_name.setdefault(name, set()).update(options)
    return [{"name": name, "values": sorted(values)} for name, values in values_by_name.items()]


def _matches_attributes(product: Mapping[str, Any], attribute_filters: Mapping[str, str]) -> bool:
    for name, wanted in attribute_filters.items():
        if wanted == ALL:
            continue
        if not any(attr.get("name") == name and wanted in (attr.get("options") or []) for attr in _attributes(product)):
            return False
    return True


def _sort_key(sort_by: SortBy):
    if sort_by == "price":
        return numeric_price
    if sort_by == "year":
        return lambda product: _leading_int(attribute_value(product, YEAR_KEY))
    return lambda product: (str(product.get("name") or "").casefold(), str(product.get("name") or ""))


def filter_and_sort_products(
    products: Iterable[Mapping[str, Any]],
    *,
    search: str = "",
    category: str = ALL,
    attribute_filters: Mapping[str, str] | None = None,
    sort_by: SortBy = "name",
    sort_order: SortOrder = "asc",
) -> list[Mapping[str, Any]]:
    term = search.lower()
    filtered = [
        product
        for product in products
        if (not term or term in str(product.get("name") or "").lower())
        and (category == ALL or category in category_names(product))
        and _matches_attributes(product, attribute_filters or {})
    ]
    # sorted() is stable in both directions, ties keep their input order
    return sorted(filtered, key=_sort_key(sort_by), reverse=sort_order == "desc")


def filters_active(search: str, category: str, attribute_filters: Mapping[str, str]) -> bool:
    return bool(search) or category != ALL or any(value != ALL for value in attribute_filters.values())


def price_sortable(products: Iterable[Mapping[str, Any]]) -> bool:
    return any(numeric_price(product) > 0 for product in products)


def year_sortable(products: Iterable[Mapping[str, Any]]) -> bool:
    return any(attribute_value(product, YEAR_KEY) for product in products)


# ---------- Country list view ----------

def filter_countries(
    countries: Iterable[Mapping[str, Any]],
    *,
    search: str = "",
    direction: SortOrder = "asc",
) -> list[Mapping[str, Any]]:
    term = search.strip().lower()
    filtered = [c for c in countries if not term or term in str(c.get("name") or "").lower()]
    return sorted(
        filtered,
        key=lambda c: (str(c.get("name") or "").casefold(), str(c.get("name") or "")),
        reverse=direction == "desc",
    )
