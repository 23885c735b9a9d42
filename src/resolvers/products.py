"""Resolvers for product catalog queries and mutations.

Each resolver makes one call against the fixed product collection (search
makes one index query plus one read per hit) and returns plain models.
Storage errors are logged and re-raised unchanged.
"""

import asyncio
import logging
import uuid
from contextlib import contextmanager
from typing import Generator, List

from azure.core.exceptions import AzureError

from src.clients.catalog_store import CatalogStore
from src.clients.cosmosdb_client import DocumentCollection
from src.models import Product

logger = logging.getLogger(__name__)

# Storage location (not externalized to config)
STORE_BUCKET = "store-bucket"
PRODUCTS_SCOPE = "products-scope"
PRODUCTS_COLLECTION = "products"
PRODUCTS_SEARCH_INDEX = "index-products"
SEARCH_RESULT_LIMIT = 2

QUANTITY_FIELD = "quantity"


def _products(store: CatalogStore) -> DocumentCollection:
    return store.collection(STORE_BUCKET, PRODUCTS_SCOPE, PRODUCTS_COLLECTION)


@contextmanager
def _log_storage_errors(operation: str, target: str) -> Generator[None, None, None]:
    """Log a storage failure for operators, then let it propagate as is."""
    try:
        yield
    except AzureError as e:
        logger.error(f"{operation} failed for {target}: {e}")
        raise


async def get_product(store: CatalogStore, id: str) -> Product:
    """
    Read a product by key.

    Raises:
        CosmosResourceNotFoundError: If no product exists under id.
    """
    with _log_storage_errors("getProduct", id):
        document = await _products(store).get(id)
    return Product.from_document(document, key=id)


async def get_all_products_with_term(store: CatalogStore, term: str) -> List[Product]:
    """
    Search products by free-text term.

    Hits are read concurrently and returned in search-result order. If any
    hit no longer resolves to a document the whole search fails.

    Args:
        store: Catalog store handle.
        term: Free-text search term.

    Returns:
        At most SEARCH_RESULT_LIMIT products, empty if nothing matches.

    Raises:
        AzureError: If the search query fails.
        CosmosResourceNotFoundError: If a hit's document is gone.
    """
    with _log_storage_errors("getAllProductsWithTerm", repr(term)):
        keys = await store.search_query(PRODUCTS_SEARCH_INDEX, term, SEARCH_RESULT_LIMIT)

    collection = _products(store)
    with _log_storage_errors("getAllProductsWithTerm", repr(term)):
        documents = await asyncio.gather(*(collection.get(key) for key in keys))

    return [Product.from_document(document, key=key) for key, document in zip(keys, documents)]


async def create_product(store: CatalogStore, product: Product) -> Product:
    """
    Store a new product under a freshly minted key.

    Returns:
        The given product with the minted key as its id.

    Raises:
        CosmosResourceExistsError: If the minted key is already taken.
    """
    key = str(uuid.uuid4())

    with _log_storage_errors("createProduct", key):
        await _products(store).insert(key, product.to_document())

    logger.info(f"Created product {key}")
    return product.with_id(key)


async def delete_product(store: CatalogStore, id: str) -> bool:
    """
    Delete a product by key.

    Returns:
        Always True; a missing product raises instead.

    Raises:
        CosmosResourceNotFoundError: If no product exists under id.
    """
    with _log_storage_errors("deleteProduct", id):
        await _products(store).remove(id)

    logger.info(f"Deleted product {id}")
    return True


async def update_product(store: CatalogStore, id: str, product: Product) -> Product:
    """
    Overwrite a product. Fields missing from ``product`` are not kept.

    Raises:
        CosmosResourceNotFoundError: If no product exists under id.
    """
    with _log_storage_errors("updateProduct", id):
        await _products(store).replace(id, product.to_document())
    return product.with_id(id)


async def set_quantity(store: CatalogStore, id: str, quantity: int) -> bool:
    """
    Set only the quantity of a product, leaving other fields untouched.

    Raises:
        CosmosResourceNotFoundError: If no product exists under id.
        CosmosHttpResponseError: If the stored document has no quantity field.
    """
    with _log_storage_errors("setQuantity", id):
        await _products(store).mutate_field(id, QUANTITY_FIELD, quantity)
    return True
