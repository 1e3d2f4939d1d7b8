from typing import Any

from fastapi import APIRouter, Depends

from app.api.deps import get_woo_client
from app.services import attribute_service
from app.services.woocommerce import WooCommerceClient

router = APIRouter(prefix="/attributes", tags=["attributes"])


@router.get("/countries", response_model=list[dict[str, Any]])
async def countries(client: WooCommerceClient = Depends(get_woo_client)):
    return await attribute_service.list_countries(client)


@router.get("/quality", response_model=list[dict[str, Any]])
async def qualities(client: WooCommerceClient = Depends(get_woo_client)):
    return await attribute_service.list_qualities(client)


@router.get("/years", response_model=list[dict[str, Any]])
async def years(client: WooCommerceClient = Depends(get_woo_client)):
    return await attribute_service.list_years(client)
