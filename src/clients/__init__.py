"""Client modules for external services."""

from src.clients.catalog_store import CatalogStore
from src.clients.cosmosdb_client import CosmosDBClient, DocumentCollection
from src.clients.search_client import SearchIndexClient

__all__ = [
    "CatalogStore",
    "CosmosDBClient",
    "DocumentCollection",
    "SearchIndexClient",
]
