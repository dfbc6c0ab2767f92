"""Entry point for the Catalog API.

Starts uvicorn serving the GraphQL endpoint.  It is intended to be
executed from the project root::

    python run.py

Host and port come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0``
and ``8000``), see ``catalog_api.app.core.config``.
"""
import asyncio

from uvicorn import Config, Server

from catalog_api.app.core.config import settings
from catalog_api.app.main import app


async def run_api() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
