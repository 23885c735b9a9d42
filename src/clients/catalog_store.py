"""Process-wide handle to the catalog's document store and search index."""

import logging
from typing import List

from src.clients.cosmosdb_client import CosmosDBClient, DocumentCollection
from src.clients.search_client import SearchIndexClient
from src.config.configuration import AppConfig

logger = logging.getLogger(__name__)


class CatalogStore:
    """Connection handle shared by every request.

    Built once at startup and passed to resolvers through the GraphQL
    context. Requests only read from it; connection settings never change
    after construction.
    """

    def __init__(self, documents: CosmosDBClient, search: SearchIndexClient):
        self._documents = documents
        self._search = search

    @classmethod
    def from_config(cls, config: AppConfig) -> "CatalogStore":
        """Build an unconnected store from application configuration."""
        documents = CosmosDBClient(
            endpoint=config.cosmosdb.endpoint,
            key=config.cosmosdb.key,
            **config.cosmosdb.client_options,
        )
        search = SearchIndexClient(
            endpoint=config.azure_ai_search.endpoint,
            api_key=config.azure_ai_search.api_key,
        )
        return cls(documents, search)

    async def connect(self) -> None:
        await self._documents.connect()

    async def close(self) -> None:
        await self._search.close()
        await self._documents.close()

    async def __aenter__(self) -> "CatalogStore":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.close()
        return False

    def collection(self, bucket: str, scope: str, name: str) -> DocumentCollection:
        """Address one collection within a bucket and scope."""
        return self._documents.collection(bucket, scope, name)

    async def search_query(self, index_name: str, term: str, limit: int) -> List[str]:
        """Return the keys of up to ``limit`` documents matching ``term``."""
        return await self._search.search(index_name, term, limit)
