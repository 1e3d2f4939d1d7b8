import logging
from typing import Any

from app.schemas.product import ProductCreate, ProductUpdate
from app.services.exceptions import DomainValidationError
from app.services.product_cache import ProductCache
from app.services.woocommerce import WooCommerceClient
from .utils import build_attributes


logger = logging.getLogger(__name__)


def build_create_payload(payload: ProductCreate) -> dict[str, Any]:
    name = (payload.name or "").strip()
    if not name:
        raise DomainValidationError("Product name is required")

    data: dict[str, Any] = {
        "name": name,
        "type": "simple",
        "status": payload.status,
        "regular_price": "0",
        "attributes": build_attributes(payload.country, payload.quality, payload.year),
    }

    # first id is the front (main image), second the back (gallery)
    images = [
        {"id": image_id, "position": position}
        for position, image_id in enumerate(payload.image_ids[:2])
        if image_id
    ]
    if images:
        data["images"] = images
    else:
        logger.info("No images provided for new product", extra={"product_name": name})
    return data


def build_update_payload(changes: ProductUpdate) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if changes.name:
        data["name"] = changes.name
    if changes.price:
        data["regular_price"] = str(changes.price)
    if changes.category:
        data["categories"] = [{"name": changes.category}]

    attributes = build_attributes(changes.country, changes.quality, changes.year)
    if attributes:
        data["attributes"] = attributes

    if changes.images:
        data["images"] = [image.model_dump() for image in changes.images]
    return data


async def create_product(client: WooCommerceClient, cache: ProductCache, payload: ProductCreate) -> dict[str, Any]:
    data = build_create_payload(payload)
    logger.info("Creating product", extra={"payload": data})

    product = await client.request("POST", "/products", json=data)
    cache.clear()

    logger.info(
        "Product created",
        extra={"product_id": product.get("id"), "image_count": len(product.get("images") or [])},
    )
    return product


async def update_product(client: WooCommerceClient, cache: ProductCache, changes: ProductUpdate) -> dict[str, Any]:
    if not changes.id:
        raise DomainValidationError("Product ID is required")

    data = build_update_payload(changes)
    logger.info("Updating product", extra={"product_id": changes.id, "payload": data})

    product = await client.request("PUT", f"/products/{changes.id}", json=data)
    cache.clear()
    return product


async def delete_product(client: WooCommerceClient, cache: ProductCache, product_id: str | None) -> dict[str, Any]:
    if not product_id:
        raise DomainValidationError("Product ID is required")

    logger.info("Deleting product", extra={"product_id": product_id})
    # force=true skips the trash
    result = await client.request("DELETE", f"/products/{product_id}", params={"force": "true"})
    cache.clear()

    logger.info("Product deleted", extra={"product_id": product_id})
    return result
