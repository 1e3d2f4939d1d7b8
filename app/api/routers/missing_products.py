from fastapi import APIRouter, Body, Depends, Path

from app.api.deps import get_missing_store
from app.schemas.missing import MissingChange, MissingChangeResult, MissingList
from app.services.missing_products import MissingProductsStore

router = APIRouter(prefix="/missing-products", tags=["missing-products"])


@router.get("/{slug}", response_model=MissingList)
async def get_missing(
    slug: str = Path(..., description="slug del país"),
    store: MissingProductsStore = Depends(get_missing_store),
):
    return MissingList(country=slug, missing=store.get(slug))


@router.post("/{slug}", response_model=MissingChangeResult)
async def add_missing(
    slug: str = Path(...),
    payload: MissingChange | None = Body(None),
    store: MissingProductsStore = Depends(get_missing_store),
):
    product = store.add(slug, payload.product if payload else None)
    return MissingChangeResult(country=slug, product=product)


@router.delete("/{slug}", response_model=MissingChangeResult)
async def remove_missing(
    slug: str = Path(...),
    payload: MissingChange | None = Body(None),
    store: MissingProductsStore = Depends(get_missing_store),
):
    product = store.remove(slug, payload.product if payload else None)
    return MissingChangeResult(country=slug, product=product)
