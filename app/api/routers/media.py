from fastapi import APIRouter, Depends, File, UploadFile

from app.api.deps import get_woo_client
from app.api.error_handlers import error_response
from app.schemas.media import MediaUploadResult
from app.services import media_service
from app.services.exceptions import ServiceError
from app.services.woocommerce import WooCommerceClient

router = APIRouter(prefix="/media", tags=["media"])


@router.post("/upload", response_model=MediaUploadResult)
async def upload(
    file: UploadFile | None = File(None),
    client: WooCommerceClient = Depends(get_woo_client),
):
    try:
        media = await media_service.upload_image(client, file)
    except ServiceError as exc:
        return error_response(exc, with_success=True)
    return MediaUploadResult(**media)
