"""Azure AI Search client for full-text product lookups."""

import logging
from typing import Dict, List, Optional

from azure.core.credentials import AzureKeyCredential
from azure.search.documents.aio import SearchClient as AsyncSearchClient

logger = logging.getLogger(__name__)

# Index field holding the document key
KEY_FIELD_NAME = "id"


class SearchIndexClient:
    """Runs full-text queries against Azure AI Search indexes.

    One async SearchClient is created lazily per index name and reused for
    the lifetime of this object.
    """

    def __init__(self, endpoint: str, api_key: str):
        self._endpoint = endpoint
        self._credential = AzureKeyCredential(api_key)
        self._clients: Dict[str, AsyncSearchClient] = {}
        self._closed = False

    def _get_client(self, index_name: str) -> AsyncSearchClient:
        if self._closed:
            raise RuntimeError("Search client is closed.")

        client: Optional[AsyncSearchClient] = self._clients.get(index_name)
        if client is None:
            client = AsyncSearchClient(
                endpoint=self._endpoint,
                index_name=index_name,
                credential=self._credential,
            )
            self._clients[index_name] = client
        return client

    async def search(self, index_name: str, term: str, limit: int) -> List[str]:
        """
        Query an index by free-text term.

        Args:
            index_name: Name of the search index.
            term: Free-text search term.
            limit: Maximum number of hits.

        Returns:
            Document keys of the hits, in ranking order.

        Raises:
            AzureError: If the search operation fails.
        """
        client = self._get_client(index_name)
        results = await client.search(
            search_text=term,
            top=limit,
            select=[KEY_FIELD_NAME],
        )
        return [result[KEY_FIELD_NAME] async for result in results]

    async def close(self) -> None:
        """Close every index client."""
        for client in self._clients.values():
            await client.close()
        self._clients.clear()
        self._closed = True
