"""Azure Cosmos DB client for product document storage."""

import logging
from typing import Any, Optional

from azure.cosmos.aio import CosmosClient
from azure.cosmos.aio._container import ContainerProxy

logger = logging.getLogger(__name__)

# Properties Cosmos DB adds to every stored item
SYSTEM_PROPERTIES = ("id", "_rid", "_self", "_etag", "_attachments", "_ts")


def container_id_for(scope: str, collection: str) -> str:
    """Cosmos DB has no scope level, so the scope prefixes the container id."""
    return f"{scope}.{collection}"


def strip_system_properties(item: dict[str, Any]) -> dict[str, Any]:
    """Return the document body without the key and Cosmos system properties."""
    return {k: v for k, v in item.items() if k not in SYSTEM_PROPERTIES}


class DocumentCollection:
    """Key/value access to one container, addressed by document key.

    Containers are partitioned on ``/id``, so the document key doubles as the
    partition key value. The key is stored as the item ``id`` and never as
    part of the body returned to callers.
    """

    def __init__(self, container: ContainerProxy, bucket: str, scope: str, name: str):
        self._container = container
        self.bucket = bucket
        self.scope = scope
        self.name = name

    async def get(self, key: str) -> dict[str, Any]:
        """Read the document body stored under key.

        Raises:
            CosmosResourceNotFoundError: If no document exists under key.
        """
        item = await self._container.read_item(item=key, partition_key=key)
        return strip_system_properties(dict(item))

    async def insert(self, key: str, body: dict[str, Any]) -> None:
        """Insert a new document under key.

        Raises:
            CosmosResourceExistsError: If a document already exists under key.
        """
        await self._container.create_item(body={**body, "id": key})

    async def replace(self, key: str, body: dict[str, Any]) -> None:
        """Overwrite the whole document under key.

        Raises:
            CosmosResourceNotFoundError: If no document exists under key.
        """
        await self._container.replace_item(item=key, body={**body, "id": key})

    async def remove(self, key: str) -> None:
        """Delete the document under key.

        Raises:
            CosmosResourceNotFoundError: If no document exists under key.
        """
        await self._container.delete_item(item=key, partition_key=key)

    async def mutate_field(self, key: str, field_path: str, value: Any) -> None:
        """Replace a single field of the document under key in place.

        Raises:
            CosmosResourceNotFoundError: If no document exists under key.
            CosmosHttpResponseError: If the document has no such field.
        """
        await self._container.patch_item(
            item=key,
            partition_key=key,
            patch_operations=[{"op": "replace", "path": f"/{field_path}", "value": value}],
        )


class CosmosDBClient:
    """Async Cosmos DB client with connection management.

    Uses the NoSQL API. One client is shared by the whole process.
    Supports async context manager pattern for proper resource cleanup.
    """

    def __init__(self, endpoint: str, key: str, **client_options: Any):
        """Initialize the Cosmos DB client.

        Args:
            endpoint: Cosmos DB account endpoint URL
            key: Cosmos DB account key
            **client_options: Extra CosmosClient options (latency profile)
        """
        self._endpoint = endpoint
        self._key = key
        self._client_options = client_options

        self._client: Optional[CosmosClient] = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Establish the connection to the Cosmos DB account."""
        self._client = CosmosClient(url=self._endpoint, credential=self._key, **self._client_options)
        await self._client.__aenter__()
        logger.info(f"Connected to Cosmos DB at {self._endpoint}")

    async def close(self) -> None:
        """Close the Cosmos DB connection."""
        if self._client:
            await self._client.close()
            self._client = None
            logger.info("Cosmos DB connection closed")

    async def __aenter__(self) -> "CosmosDBClient":
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Async context manager exit with cleanup."""
        await self.close()
        return False

    def collection(self, bucket: str, scope: str, name: str) -> DocumentCollection:
        """Get a handle to a collection. No round trip is made.

        Args:
            bucket: Database name
            scope: Scope name, prefixed to the container id
            name: Collection name

        Raises:
            RuntimeError: If client is not connected.
        """
        if self._client is None:
            raise RuntimeError("CosmosDB client not connected. Call connect() first.")

        database = self._client.get_database_client(bucket)
        container = database.get_container_client(container_id_for(scope, name))
        return DocumentCollection(container, bucket, scope, name)
