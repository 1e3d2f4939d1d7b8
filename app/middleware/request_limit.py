from __future__ import annotations

from typing import Callable, Iterable

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.core.logging import get_logger
from app.middleware.observability import client_ip

BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class PayloadLimitMiddleware(BaseHTTPMiddleware):
    """Cap request bodies: image uploads get the large limit, JSON routes the small one.

    A declared ``Content-Length`` is trusted; chunked bodies are read and measured.
    """

    def __init__(
        self,
        app,
        *,
        upload_max_bytes: int | None = None,
        json_max_bytes: int | None = None,
        upload_paths: Iterable[str] = ("/media/upload",),
    ) -> None:
        super().__init__(app)
        self.upload_max_bytes = upload_max_bytes or settings.MAX_REQUEST_SIZE_BYTES
        self.json_max_bytes = json_max_bytes or settings.MAX_JSON_BODY_BYTES
        self.upload_paths = tuple(upload_paths)
        self.logger = get_logger("app.request_limit")

    def limit_for(self, path: str) -> int:
        if path.rstrip("/").endswith(self.upload_paths):
            return self.upload_max_bytes
        return self.json_max_bytes

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method in BODYLESS_METHODS:
            return await call_next(request)

        limit = self.limit_for(request.url.path)
        declared = request.headers.get("content-length", "")
        if declared.isdigit():
            size = int(declared)
        else:
            # Request keeps the body, the endpoint reads it again
            size = len(await request.body())

        if size > limit:
            self.logger.warning(
                "Rejected oversized request body",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "size": size,
                    "limit": limit,
                    "client_ip": client_ip(request),
                },
            )
            return JSONResponse(
                {"success": False, "error": "Request payload too large."},
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            )
        return await call_next(request)
