# app/api/deps.py
from app.services.missing_products import MissingProductsStore, missing_store
from app.services.product_cache import ProductCache, product_cache
from app.services.woocommerce import WooCommerceClient


_woo_client: WooCommerceClient | None = None


def get_woo_client() -> WooCommerceClient:
    """Process-wide WooCommerce client, created on first use."""
    global _woo_client
    if _woo_client is None:
        _woo_client = WooCommerceClient()
    return _woo_client


async def close_woo_client() -> None:
    global _woo_client
    if _woo_client is not None:
        await _woo_client.aclose()
        _woo_client = None


def get_product_cache() -> ProductCache:
    return product_cache


def get_missing_store() -> MissingProductsStore:
    return missing_store
