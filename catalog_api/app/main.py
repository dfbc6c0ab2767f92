"""
FastAPI application factory for the catalog.

``create_app`` wires a seeded (or caller‑supplied) ``CatalogStore``
into a ``CatalogService``, stores the service on ``app.state`` and
mounts the GraphQL router under ``settings.graphql_path``.  A module
level ``app`` is built on import for ASGI servers::

    uvicorn catalog_api.app.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.graphql import create_graphql_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import CatalogStore
from .services.catalog_service import CatalogService


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[CatalogStore]
        Store backing the catalog.  A freshly seeded store is used when
        omitted, so every application instance starts from the same
        records and never shares mutations with another instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the startup hook
    # and the service can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.catalog_service = CatalogService(store if store is not None else CatalogStore.seeded())

    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix=settings.graphql_path)

    @app.on_event("startup")
    async def startup_event() -> None:
        logging.getLogger(__name__).info("Server running on port %s", settings.port)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Built on import so that ``uvicorn catalog_api.app.main:app`` finds it.
app = create_app()
