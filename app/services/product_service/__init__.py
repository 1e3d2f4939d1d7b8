from .read import (
    clamp_private_paging,
    count_private_by_kind,
    count_products_by_type,
    list_private_products,
    list_products_by_country,
    list_products_by_country_type,
    list_products_by_type,
)

from .crud import (
    build_create_payload,
    build_update_payload,
    create_product,
    delete_product,
    update_product,
)

__all__ = [
    # read
    "clamp_private_paging", "count_private_by_kind", "count_products_by_type",
    "list_private_products", "list_products_by_country", "list_products_by_country_type",
    "list_products_by_type",
    # crud
    "build_create_payload", "build_update_payload", "create_product", "delete_product", "update_product",
]
