from __future__ import annotations

from typing import Callable, Mapping

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.config import settings

# Swagger UI and ReDoc load scripts from a CDN
DOCS_PATHS = ("/docs", "/redoc")
NO_STORE = "no-store"


def default_security_headers() -> dict[str, str]:
    return {
        "Strict-Transport-Security": settings.STRICT_TRANSPORT_SECURITY,
        "X-Frame-Options": settings.X_FRAME_OPTIONS,
        "X-Content-Type-Options": settings.X_CONTENT_TYPE_OPTIONS,
        "Referrer-Policy": settings.REFERRER_POLICY,
        "Permissions-Policy": settings.PERMISSIONS_POLICY,
    }


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Hardening headers for the dashboard API.

    Headers a route already set are left alone. The CSP is not sent on the
    interactive docs. Inventory responses under the API prefix are marked
    ``no-store`` unless the route chose its own caching, as the public
    by-country and by-type listings do.
    """

    def __init__(
        self,
        app,
        *,
        headers: Mapping[str, str] | None = None,
        content_security_policy: str | None = None,
        api_prefix: str | None = None,
    ) -> None:
        super().__init__(app)
        self.headers = dict(default_security_headers() if headers is None else headers)
        self.content_security_policy = content_security_policy or settings.CONTENT_SECURITY_POLICY
        self.api_prefix = api_prefix if api_prefix is not None else settings.API_PREFIX

    def _is_api(self, path: str) -> bool:
        return bool(self.api_prefix) and (path == self.api_prefix or path.startswith(f"{self.api_prefix}/"))

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        path = request.url.path
        for name, value in self.headers.items():
            if value:
                response.headers.setdefault(name, value)
        if not path.startswith(DOCS_PATHS):
            response.headers.setdefault("Content-Security-Policy", self.content_security_policy)
        if self._is_api(path):
            response.headers.setdefault("Cache-Control", NO_STORE)
        return response
