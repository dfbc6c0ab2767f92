"""
Service layer abstraction.

Services encapsulate the catalog operations.  They receive their store
by injection and know nothing about the protocol that exposes them, so
the GraphQL binding in ``api/graphql`` is a thin adapter.
"""
