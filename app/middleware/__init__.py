"""HTTP middleware for the vault API: payload limits, security headers, request ids and metrics."""

from .observability import REQUEST_ID_HEADER, ObservabilityMiddleware
from .request_limit import PayloadLimitMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "REQUEST_ID_HEADER",
    "ObservabilityMiddleware",
    "PayloadLimitMiddleware",
    "SecurityHeadersMiddleware",
]
