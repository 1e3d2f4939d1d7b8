"""Image uploads to the WordPress media library."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import UploadFile

from app.services.exceptions import DomainValidationError
from app.services.woocommerce import WooCommerceClient


logger = logging.getLogger(__name__)


async def upload_image(client: WooCommerceClient, file: UploadFile | None) -> dict[str, Any]:
    """
    Forward an uploaded file to the custom WordPress upload endpoint.

    Returns the media ``id`` and public ``url`` WordPress assigned. Those ids
    are what product create/update expect as image references.
    """
    if file is None or not file.filename:
        raise DomainValidationError("No file provided")

    content = await file.read()
    logger.info(
        "Uploading image",
        extra={"upload_name": file.filename, "size": len(content), "content_type": file.content_type},
    )
    data = await client.upload_file(file.filename, content, file.content_type)

    logger.info("Image uploaded", extra={"media_id": data.get("id")})
    return {"id": data.get("id"), "url": data.get("url")}


__all__ = ["upload_image"]
