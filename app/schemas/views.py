from typing import Any

from pydantic import BaseModel, ConfigDict


class _ViewModel(BaseModel):
    # view payloads keep the camelCase keys the dashboard reads
    model_config = ConfigDict(extra="allow")


class DashboardStats(_ViewModel):
    coins: int = 0
    banknotes: int = 0
    publicProducts: int = 0
    privateProducts: int = 0
    countries: int = 0


class CountryListView(_ViewModel):
    total: int
    matched: int
    countries: list[dict[str, Any]]


class AttributeFilter(BaseModel):
    name: str
    values: list[str]


class CountryDetailView(_ViewModel):
    country: str
    countryName: str
    flagUrl: str
    tab: str
    counts: dict[str, int]
    missing: list[str]
    categories: list[str]
    attributeFilters: list[AttributeFilter]
    priceSortable: bool
    yearSortable: bool
    filtersActive: bool
    products: list[dict[str, Any]]


class CollectionFilters(BaseModel):
    countries: list[str]
    categories: list[str]
    qualities: list[str]
    years: list[str]


class CollectionView(_ViewModel):
    total: int
    matched: int
    filtersActive: bool
    filters: CollectionFilters
    products: list[dict[str, Any]]
