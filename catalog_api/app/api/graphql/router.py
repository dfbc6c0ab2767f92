"""
FastAPI router serving the GraphQL schema.

POST requests execute queries and mutations; GET requests from a
browser receive the GraphiQL explorer.  The catalog service is read
from ``app.state`` for every request and handed to resolvers through
the context, so the router itself holds no data.
"""

from typing import Any, Dict

from fastapi import Request
from strawberry.fastapi import GraphQLRouter

from .schema import schema


async def get_context(request: Request) -> Dict[str, Any]:
    """Expose the application's catalog service to resolvers."""
    return {"service": request.app.state.catalog_service}


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    """Build a router for the catalog schema.

    Parameters
    ----------
    graphiql : bool
        Serve the GraphiQL explorer on GET requests that accept HTML.
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
