from pydantic import BaseModel


class MediaUploadResult(BaseModel):
    success: bool = True
    id: int | None = None
    url: str | None = None
