"""Resolvers for the product catalog API."""

from src.resolvers.products import (
    PRODUCTS_COLLECTION,
    PRODUCTS_SCOPE,
    PRODUCTS_SEARCH_INDEX,
    SEARCH_RESULT_LIMIT,
    STORE_BUCKET,
    create_product,
    delete_product,
    get_all_products_with_term,
    get_product,
    set_quantity,
    update_product,
)

__all__ = [
    "PRODUCTS_COLLECTION",
    "PRODUCTS_SCOPE",
    "PRODUCTS_SEARCH_INDEX",
    "SEARCH_RESULT_LIMIT",
    "STORE_BUCKET",
    "create_product",
    "delete_product",
    "get_all_products_with_term",
    "get_product",
    "set_quantity",
    "update_product",
]
