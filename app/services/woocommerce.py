"""Async client for the WooCommerce REST API and the WordPress media endpoint."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

import httpx

from app.core.config import Settings, settings as default_settings
from app.core.metrics import record_upstream_call
from app.services.exceptions import ConfigurationError, UpstreamError


logger = logging.getLogger(__name__)


class WooCommerceClient:
    """Thin wrapper over ``httpx.AsyncClient`` bound to one shop.

    WooCommerce calls are authenticated with the consumer key/secret pair as
    HTTP basic auth. The media upload endpoint is a custom WordPress route and
    is called without credentials.
    """

    def __init__(
        self,
        config: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = config or default_settings
        self._auth = httpx.BasicAuth(self.settings.WC_CONSUMER_KEY, self.settings.WC_CONSUMER_SECRET)
        self._client = httpx.AsyncClient(
            timeout=self.settings.WC_TIMEOUT_SECONDS,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def page_size(self) -> int:
        return self.settings.WC_PAGE_SIZE

    def ensure_configured(self) -> None:
        if not self.settings.has_credentials:
            raise ConfigurationError("WooCommerce credentials are not configured")

    async def request_with_headers(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> tuple[Any, httpx.Headers]:
        """Call ``{WP_URL}/wp-json/wc/v3{endpoint}`` and return decoded JSON plus headers."""
        self.ensure_configured()
        url = f"{self.settings.woo_api_url}{endpoint}"
        logger.info("WooCommerce request", extra={"method": method, "endpoint": endpoint, "params": dict(params or {})})

        start = time.perf_counter()
        try:
            response = await self._client.request(method, url, params=params, json=json, auth=self._auth)
        except httpx.HTTPError as exc:
            record_upstream_call(method, "error", time.perf_counter() - start)
            logger.error("WooCommerce connection error", extra={"method": method, "endpoint": endpoint, "error": str(exc)})
            raise UpstreamError(f"WooCommerce connection error: {exc}") from exc

        elapsed = time.perf_counter() - start
        record_upstream_call(method, response.status_code, elapsed)

        if response.is_error:
            body = response.text
            logger.error(
                "WooCommerce API error",
                extra={"method": method, "endpoint": endpoint, "status_code": response.status_code, "body": body},
            )
            raise UpstreamError(
                f"WooCommerce API Error ({response.status_code}): {body}",
                status_code=response.status_code,
                body=body,
            )

        logger.debug(
            "WooCommerce response",
            extra={"endpoint": endpoint, "status_code": response.status_code, "duration_ms": round(elapsed * 1000, 3)},
        )
        return _decode_json(response, "WooCommerce API Error"), response.headers

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        data, _ = await self.request_with_headers(method, endpoint, params=params, json=json)
        return data

    async def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", endpoint, params=params)

    async def paginate(
        self,
        endpoint: str,
        params: Mapping[str, Any] | None = None,
        *,
        page_size: int | None = None,
        tolerate_errors: bool = False,
    ) -> list[Any]:
        """Fetch every page of a listing endpoint.

        Stops on an empty page or on a page shorter than ``per_page``. With
        ``tolerate_errors`` a failing page ends the loop and the pages already
        fetched are returned.
        """
        per_page = page_size or self.page_size
        items: list[Any] = []
        page = 1
        while True:
            query = {**(params or {}), "per_page": per_page, "page": page}
            try:
                batch = await self.get(endpoint, query)
            except UpstreamError:
                if not tolerate_errors:
                    raise
                logger.exception("Error fetching page", extra={"endpoint": endpoint, "page": page})
                break

            if not batch:
                break
            items.extend(batch)
            logger.info(
                "Fetched page",
                extra={"endpoint": endpoint, "page": page, "count": len(batch), "total": len(items)},
            )
            if len(batch) < per_page:
                break
            page += 1
        return items

    async def upload_file(self, filename: str, content: bytes, content_type: str | None) -> dict[str, Any]:
        """Forward a file to the WordPress image upload endpoint."""
        url = self.settings.upload_url
        files = {"file": (filename, content, content_type or "application/octet-stream")}

        start = time.perf_counter()
        try:
            response = await self._client.post(url, files=files)
        except httpx.HTTPError as exc:
            record_upstream_call("POST", "error", time.perf_counter() - start)
            raise UpstreamError(f"Upload failed: {exc}") from exc

        record_upstream_call("POST", response.status_code, time.perf_counter() - start)
        if response.is_error:
            body = response.text
            raise UpstreamError(f"Upload failed: {body}", status_code=response.status_code, body=body)
        return _decode_json(response, "Upload failed")

    async def aclose(self) -> None:
        await self._client.aclose()


def _decode_json(response: httpx.Response, prefix: str) -> Any:
    # WordPress plugins can print HTML warnings into a 200 response
    try:
        return response.json()
    except ValueError as exc:
        body = response.text
        logger.error(
            "WooCommerce returned invalid JSON",
            extra={"url": str(response.request.url), "status_code": response.status_code, "body": body},
        )
        raise UpstreamError(
            f"{prefix} ({response.status_code}): invalid JSON",
            status_code=response.status_code,
            body=body,
        ) from exc


__all__ = ["WooCommerceClient"]
