"""GraphQL controller for product catalog operations."""

import logging
from typing import Any

from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from src.api.schema import create_schema

logger = logging.getLogger(__name__)


async def get_context(request: Request) -> dict[str, Any]:
    """Expose the shared catalog store to resolvers as ``info.context["store"]``."""
    return {"store": request.app.state.catalog_store}


def create_graphql_router(mask_errors: bool = False, graphiql: bool = True) -> GraphQLRouter:
    """
    Create the GraphQL router.

    Protocol:
    1. Client POSTs {"query": "...", "variables": {...}} to /graphql
    2. Server answers {"data": {...}} and, for failed fields, "errors"
       carrying the storage error message (generic when mask_errors is set)

    GraphiQL is served on GET /graphql when enabled.
    """
    schema = create_schema(mask_errors=mask_errors)
    logger.debug(f"GraphQL schema built (mask_errors={mask_errors})")
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
