from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.services.exceptions import (
    ConfigurationError,
    DomainValidationError,
    ResourceNotFoundError,
    ServiceError,
    UpstreamError,
)


logger = logging.getLogger(__name__)


def status_for(exc: ServiceError) -> int:
    if isinstance(exc, DomainValidationError):
        return 400
    if isinstance(exc, ResourceNotFoundError):
        return 404
    if isinstance(exc, (UpstreamError, ConfigurationError)):
        return 500
    return 400


def error_response(exc: ServiceError, *, with_success: bool = False) -> JSONResponse:
    """Error body in the ``{"error": ...}`` shape, optionally with ``"success": false``."""
    content: dict[str, object] = {"error": exc.detail}
    if with_success:
        content = {"success": False, **content}
    return JSONResponse(status_code=status_for(exc), content=content)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
        if status_for(exc) >= 500:
            logger.error("Request failed", extra={"path": request.url.path, "error": exc.detail})
        return error_response(exc)
