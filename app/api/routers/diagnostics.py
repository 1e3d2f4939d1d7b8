from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_product_cache, get_woo_client
from app.schemas.cache import CacheStatus
from app.services import attribute_service
from app.services.exceptions import ServiceError
from app.services.product_cache import ProductCache
from app.services.woocommerce import WooCommerceClient

router = APIRouter(tags=["diagnostics"])


@router.get("/test/connection")
async def test_connection(client: WooCommerceClient = Depends(get_woo_client)):
    try:
        attributes = await attribute_service.list_product_attributes(client)
    except ServiceError as exc:
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Connection failed ❌", "error": exc.detail},
        )
    return {
        "success": True,
        "message": "Connection successful! ✅",
        "attributesFound": len(attributes),
        "attributes": attributes,
    }


@router.get("/cache/status", response_model=CacheStatus)
async def cache_status(cache: ProductCache = Depends(get_product_cache)):
    return cache.status()


@router.post("/cache/clear")
async def cache_clear(cache: ProductCache = Depends(get_product_cache)):
    cache.clear()
    return {"success": True}
