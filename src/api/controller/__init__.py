"""API controllers."""

from src.api.controller.graphql_controller import create_graphql_router, get_context

__all__ = ["create_graphql_router", "get_context"]
