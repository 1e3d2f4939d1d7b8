from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from app.api.deps import get_product_cache, get_woo_client
from app.api.error_handlers import error_response
from app.schemas.product import (
    CountryProducts,
    ProductCreate,
    ProductDeleteResult,
    ProductMutationResult,
    ProductUpdate,
)
from app.services import product_service
from app.services.exceptions import ServiceError
from app.services.product_cache import ProductCache
from app.services.woocommerce import WooCommerceClient

router = APIRouter(prefix="/products", tags=["products"])


def cached_json(payload: Any, max_age: int = 300, stale_while_revalidate: int = 600) -> JSONResponse:
    """JSON response that shared caches may keep for ``max_age`` seconds."""
    response = JSONResponse(payload)
    response.headers["Cache-Control"] = (
        f"public, s-maxage={max_age}, stale-while-revalidate={stale_while_revalidate}"
    )
    return response


# ---------- Lectura ----------
@router.get("/by-country", response_model=CountryProducts)
async def by_country(
    country: str | None = Query(None, description="slug del país"),
    product_type: str | None = Query(None, alias="type", description="public | private"),
    client: WooCommerceClient = Depends(get_woo_client),
):
    products = await product_service.list_products_by_country(client, country, product_type)
    return cached_json({"products": products, "countryName": country})


@router.get("/by-country-type", response_model=CountryProducts)
async def by_country_type(
    country: str | None = Query(None, description="slug del país"),
    product_type: str | None = Query(None, alias="type", description="public | private"),
    client: WooCommerceClient = Depends(get_woo_client),
    cache: ProductCache = Depends(get_product_cache),
):
    products = await product_service.list_products_by_country_type(client, cache, country, product_type)
    return CountryProducts(products=products, country_name=country or "")


@router.get("/by-type")
async def by_type(
    product_type: str | None = Query(None, alias="type", description="public | private"),
    count: str | None = Query(None, description="'true' para devolver solo el total"),
    categories: str | None = Query(None, description="'true' para contar monedas y billetes"),
    client: WooCommerceClient = Depends(get_woo_client),
):
    client.ensure_configured()

    if categories == "true":
        return cached_json(await product_service.count_private_by_kind(client))

    if count == "true":
        total = await product_service.count_products_by_type(client, product_type)
        return cached_json({"count": total}, 120, 300)

    products = await product_service.list_products_by_type(client, product_type)
    return cached_json(products, 120, 300)


@router.get("/private", response_model=list[dict[str, Any]])
async def private_products(
    status: str | None = Query(None, description="estado WooCommerce, 'private' por defecto"),
    page: str | None = Query(None),
    per_page: str | None = Query(None, description="10..100"),
    client: WooCommerceClient = Depends(get_woo_client),
):
    products = await product_service.list_private_products(client, status=status, page=page, per_page=per_page)
    return cached_json(products, 120, 300)


# ---------- Escritura ----------
@router.post("/create", response_model=ProductMutationResult)
async def create(
    payload: ProductCreate = Body(...),
    client: WooCommerceClient = Depends(get_woo_client),
    cache: ProductCache = Depends(get_product_cache),
):
    try:
        product = await product_service.create_product(client, cache, payload)
    except ServiceError as exc:
        return error_response(exc, with_success=True)
    return ProductMutationResult(product=product)


@router.put("/update", response_model=ProductMutationResult)
async def update(
    payload: ProductUpdate = Body(...),
    client: WooCommerceClient = Depends(get_woo_client),
    cache: ProductCache = Depends(get_product_cache),
):
    product = await product_service.update_product(client, cache, payload)
    return ProductMutationResult(product=product)


@router.delete("/delete", response_model=ProductDeleteResult)
async def delete(
    product_id: str | None = Query(None, alias="id"),
    client: WooCommerceClient = Depends(get_woo_client),
    cache: ProductCache = Depends(get_product_cache),
):
    try:
        result = await product_service.delete_product(client, cache, product_id)
    except ServiceError as exc:
        return error_response(exc, with_success=True)
    return ProductDeleteResult(product=result)
