from typing import Literal

from fastapi import APIRouter, Depends, Path, Query, Request

from app.api.deps import get_missing_store, get_product_cache, get_woo_client
from app.schemas.views import CollectionView, CountryDetailView, CountryListView, DashboardStats
from app.services import dashboard_service
from app.services.missing_products import MissingProductsStore
from app.services.product_cache import ProductCache
from app.services.woocommerce import WooCommerceClient

router = APIRouter(prefix="/views", tags=["views"])

ATTRIBUTE_FILTER_PREFIX = "attr."


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard(client: WooCommerceClient = Depends(get_woo_client)):
    return await dashboard_service.home_stats(client)


@router.get("/countries", response_model=CountryListView)
async def countries(
    search: str = Query("", description="texto a buscar en el nombre"),
    direction: Literal["asc", "desc"] = Query("asc"),
    client: WooCommerceClient = Depends(get_woo_client),
):
    return await dashboard_service.country_list(client, search=search, direction=direction)


@router.get("/countries/{slug}", response_model=CountryDetailView)
async def country_detail(
    request: Request,
    slug: str = Path(..., description="slug del país"),
    tab: Literal["public", "private", "missing"] = Query("public"),
    search: str = Query(""),
    category: str = Query("all"),
    sort_by: Literal["name", "price", "year"] = Query("name"),
    sort_order: Literal["asc", "desc"] = Query("asc"),
    client: WooCommerceClient = Depends(get_woo_client),
    cache: ProductCache = Depends(get_product_cache),
    missing: MissingProductsStore = Depends(get_missing_store),
):
    # filtros de atributos dinámicos: ?attr.Quality=UNC
    attribute_filters = {
        key[len(ATTRIBUTE_FILTER_PREFIX):]: value
        for key, value in request.query_params.items()
        if key.startswith(ATTRIBUTE_FILTER_PREFIX) and len(key) > len(ATTRIBUTE_FILTER_PREFIX)
    }
    return await dashboard_service.country_detail(
        client,
        cache,
        missing,
        slug,
        tab=tab,
        search=search,
        category=category,
        attribute_filters=attribute_filters,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/collection", response_model=CollectionView)
async def collection(
    status: str = Query("private"),
    search: str = Query(""),
    country: str = Query(""),
    category: str = Query(""),
    quality: str = Query(""),
    year: str = Query(""),
    client: WooCommerceClient = Depends(get_woo_client),
):
    return await dashboard_service.collection(
        client,
        status=status,
        search=search,
        country=country,
        category=category,
        quality=quality,
        year=year,
    )
