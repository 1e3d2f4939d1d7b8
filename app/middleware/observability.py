from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.logging import get_logger
from app.core.metrics import normalize_path, record_request_metrics

REQUEST_ID_HEADER = "X-Request-ID"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """Per-request metrics and access log, tagged with an ``X-Request-ID``.

    The id is taken from the incoming header when present so a proxy in front
    of the API can correlate its own logs. Successful requests are logged at
    DEBUG unless ``log_success`` is set; 4xx at WARNING, 5xx at ERROR.
    """

    def __init__(self, app, *, log_success: bool = False) -> None:
        super().__init__(app)
        self.logger = get_logger("app.access")
        self.log_success = log_success

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            elapsed = time.perf_counter() - started
            record_request_metrics(request, status_code, elapsed)
            self._access_log(request, request_id, status_code, elapsed)

    def _level_for(self, status_code: int) -> int:
        if status_code >= 500:
            return logging.ERROR
        if status_code >= 400:
            return logging.WARNING
        return logging.INFO if self.log_success else logging.DEBUG

    def _access_log(self, request: Request, request_id: str, status_code: int, elapsed: float) -> None:
        route = normalize_path(request)
        self.logger.log(
            self._level_for(status_code),
            "%s %s -> %s",
            request.method,
            route,
            status_code,
            extra={
                "request_id": request_id,
                "route": route,
                "query": request.url.query or None,
                "status": status_code,
                "elapsed_ms": round(elapsed * 1000, 2),
                "client_ip": client_ip(request),
            },
        )


def client_ip(request: Request) -> str | None:
    """First hop of ``X-Forwarded-For``, else the socket peer."""
    forwarded = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop
    return request.client.host if request.client else None
