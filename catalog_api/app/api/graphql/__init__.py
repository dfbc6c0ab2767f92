"""
GraphQL binding for the catalog service.

``types`` declares the ``Book`` and ``Author`` object types, ``schema``
the root ``Query`` and ``Mutation`` and ``router`` the FastAPI router
serving them.
"""

from .router import create_graphql_router  # noqa: F401
from .schema import schema  # noqa: F401
