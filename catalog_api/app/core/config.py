"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the behaviour of the demo server (port 8000, endpoint ``/graphql``,
GraphiQL enabled), so running without any environment set is enough.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a file receiving a copy of the console log.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address uvicorn binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Mount point of the GraphQL router.  GET requests from a browser
    # receive the GraphiQL explorer unless ``GRAPHIQL`` is false.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")
    graphiql: bool = os.getenv("GRAPHIQL", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
