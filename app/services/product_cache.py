from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional

from app.core.config import settings
from app.core.metrics import record_cache_lookup, record_cache_size
from app.schemas.cache import CacheStatus
from app.services.woocommerce import WooCommerceClient


logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[list[dict[str, Any]]]]


class ProductCache:
    """In-process cache for the full WooCommerce product list."""

    def __init__(self, ttl_seconds: int = 300, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl_seconds
        self._clock = clock
        self._products: Optional[list[dict[str, Any]]] = None
        self._stored_at: float = 0.0
        self._lock = asyncio.Lock()

    def _age(self) -> float:
        return self._clock() - self._stored_at

    def _is_valid(self) -> bool:
        return self._products is not None and self._age() < self.ttl

    async def get_all(self, loader: Loader) -> list[dict[str, Any]]:
        if self._is_valid():
            record_cache_lookup("hit")
            logger.info(
                "Using cached products",
                extra={"count": len(self._products or []), "cache_age_seconds": round(self._age())},
            )
            return self._products  # type: ignore[return-value]

        async with self._lock:
            # another caller may have refilled while we waited
            if self._is_valid():
                record_cache_lookup("hit")
                return self._products  # type: ignore[return-value]

            record_cache_lookup("miss")
            logger.info("Product cache expired or empty, fetching fresh data")
            products = await loader()
            self._products = products
            self._stored_at = self._clock()
            record_cache_size(len(products))
            logger.info(
                "Products fetched and cached",
                extra={"count": len(products), "ttl_seconds": self.ttl},
            )
            return products

    def clear(self) -> None:
        self._products = None
        self._stored_at = 0.0
        record_cache_size(0)
        logger.info("Product cache cleared")

    def status(self) -> CacheStatus:
        is_cached = self._products is not None
        is_valid = self._is_valid()
        age = self._age() if is_cached else 0.0
        return CacheStatus(
            is_cached=is_cached,
            is_valid=is_valid,
            product_count=len(self._products or []),
            cache_age=round(age) if is_cached else 0,
            expires_in=round(self.ttl - age) if is_valid else 0,
        )


async def fetch_all_products(client: WooCommerceClient) -> list[dict[str, Any]]:
    """Every product of the shop, any status; a failing page ends the walk."""
    return await client.paginate("/products", page_size=100, tolerate_errors=True)


async def get_all_products(client: WooCommerceClient, cache: ProductCache) -> list[dict[str, Any]]:
    return await cache.get_all(lambda: fetch_all_products(client))


product_cache = ProductCache(ttl_seconds=settings.PRODUCT_CACHE_TTL_SECONDS)

__all__ = ["ProductCache", "fetch_all_products", "get_all_products", "product_cache"]
