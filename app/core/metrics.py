from __future__ import annotations

from typing import Any

from prometheus_client import Counter, Gauge, Histogram, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from app.core.config import settings


class _NoOpMetric:
    """Stands in for every metric when METRICS_ENABLED is false."""

    def labels(self, *args: Any, **kwargs: Any) -> "_NoOpMetric":
        return self

    def observe(self, *_: Any, **__: Any) -> None:
        return None

    def inc(self, *_: Any, **__: Any) -> None:
        return None

    def set(self, *_: Any, **__: Any) -> None:
        return None


def _metric(kind: type, suffix: str, documentation: str, labels: tuple[str, ...] = (), **kwargs: Any) -> Any:
    if not settings.METRICS_ENABLED:
        return _NoOpMetric()
    if kind is Histogram:
        kwargs.setdefault("buckets", settings.METRICS_LATENCY_BUCKETS)
    return kind(f"{settings.METRICS_NAMESPACE}_{suffix}", documentation, list(labels), **kwargs)


_HTTP_LABELS = ("method", "path", "status_code")
_UPSTREAM_LABELS = ("method", "status_code")

# --- Inbound API ---
REQUEST_LATENCY = _metric(Histogram, "http_request_duration_seconds", "HTTP request latency in seconds.", _HTTP_LABELS)
REQUEST_COUNT = _metric(Counter, "http_requests_total", "Total HTTP requests processed.", _HTTP_LABELS)
REQUEST_ERRORS = _metric(Counter, "http_errors_total", "HTTP requests answered with 4xx/5xx.", _HTTP_LABELS)

# --- WooCommerce / WordPress ---
UPSTREAM_LATENCY = _metric(
    Histogram,
    "woocommerce_request_duration_seconds",
    "Latency of outbound WooCommerce/WordPress calls in seconds.",
    _UPSTREAM_LABELS,
)
UPSTREAM_COUNT = _metric(
    Counter,
    "woocommerce_requests_total",
    "Outbound WooCommerce/WordPress calls; status_code is 'error' when no response arrived.",
    _UPSTREAM_LABELS,
)

# --- Product cache ---
PRODUCT_CACHE_LOOKUPS = _metric(
    Counter, "product_cache_lookups_total", "Product list cache lookups by outcome (hit/miss).", ("outcome",)
)
PRODUCT_CACHE_SIZE = _metric(Gauge, "product_cache_products", "Products currently held in the product cache.")


def normalize_path(request) -> str:
    """Route template (``/api/views/countries/{slug}``) rather than the concrete path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def record_request_metrics(request, status_code: int, elapsed: float) -> None:
    labels = (request.method, normalize_path(request), str(status_code))
    REQUEST_COUNT.labels(*labels).inc()
    REQUEST_LATENCY.labels(*labels).observe(elapsed)
    if status_code >= 400:
        REQUEST_ERRORS.labels(*labels).inc()


def record_upstream_call(method: str, status_code: int | str, elapsed: float) -> None:
    labels = (method.upper(), str(status_code))
    UPSTREAM_COUNT.labels(*labels).inc()
    UPSTREAM_LATENCY.labels(*labels).observe(elapsed)


def record_cache_lookup(outcome: str) -> None:
    PRODUCT_CACHE_LOOKUPS.labels(outcome=outcome).inc()


def record_cache_size(count: int) -> None:
    PRODUCT_CACHE_SIZE.set(count)


def export_metrics() -> tuple[bytes, str]:
    if not settings.METRICS_ENABLED:
        return b"", "text/plain; charset=utf-8"
    return generate_latest(), CONTENT_TYPE_LATEST
