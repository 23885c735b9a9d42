"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.controller import create_graphql_router
from src.clients.catalog_store import CatalogStore
from src.config.configuration import get_config

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[CatalogStore] = None,
    mask_errors: bool = False,
    graphiql: bool = True,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Catalog store to serve from. When omitted, one is built from
            configuration and connected for the lifetime of the app.
        mask_errors: Hide storage error messages from GraphQL clients.
        graphiql: Serve the GraphiQL IDE on GET /graphql.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if store is not None:
            app.state.catalog_store = store
            yield
            return

        catalog_store = CatalogStore.from_config(get_config())
        async with catalog_store:
            app.state.catalog_store = catalog_store
            logger.info("Catalog store ready")
            yield

    app = FastAPI(
        title="Product Catalog API",
        description="GraphQL API for the product catalog",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        create_graphql_router(mask_errors=mask_errors, graphiql=graphiql),
        prefix="/graphql",
    )

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
