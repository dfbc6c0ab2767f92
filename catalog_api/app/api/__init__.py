"""
API package containing protocol bindings.

The catalog is exposed over GraphQL only; the binding lives in the
``graphql`` subpackage and exposes a ``create_graphql_router`` factory.
"""
