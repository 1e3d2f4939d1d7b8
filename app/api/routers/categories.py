from typing import Any

from fastapi import APIRouter, Depends

from app.api.deps import get_woo_client
from app.services import attribute_service
from app.services.woocommerce import WooCommerceClient

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[dict[str, Any]])
async def list_categories(client: WooCommerceClient = Depends(get_woo_client)):
    return await attribute_service.list_categories(client)
