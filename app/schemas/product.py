# app/schemas/product.py
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    # years and prices arrive as numbers from some forms
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not value:
            # numeric zero counts as not provided
            return None
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value)
    return value


# --- Images ---
class ImageRef(BaseModel):
    """Reference to an uploaded WordPress media item."""
    id: int
    position: int = Field(0, ge=0)


# --- WooCommerce payload fragments ---
class AttributePayload(BaseModel):
    id: int
    name: str
    visible: bool = True
    options: list[str]


class CategoryRef(BaseModel):
    name: str


# --- Create / Update ---
class ProductCreate(BaseModel):
    name: str | None = None
    country: str | None = None
    quality: str | None = None
    year: str | None = None
    status: str = "private"
    image_ids: list[int] = Field(default_factory=list, alias="imageIds")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("country", "quality", "year", "name", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class ProductUpdate(BaseModel):
    id: int | None = None
    name: str | None = None
    price: str | None = None
    category: str | None = None
    country: str | None = None
    quality: str | None = None
    year: str | None = None
    images: list[ImageRef] | None = None

    @field_validator("price", "country", "quality", "year", "name", "category", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


# --- Responses ---
class ProductMutationResult(BaseModel):
    success: bool = True
    product: dict[str, Any]


class ProductDeleteResult(ProductMutationResult):
    message: str = "Product deleted successfully"


class CountryProducts(BaseModel):
    products: list[dict[str, Any]]
    country_name: str = Field(serialization_alias="countryName")

    model_config = ConfigDict(populate_by_name=True)


class CategoryCounts(BaseModel):
    coins: int = 0
    banknotes: int = 0


class ProductCount(BaseModel):
    count: int = 0
