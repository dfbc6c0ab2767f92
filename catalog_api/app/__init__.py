"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Records live in an in‑memory store (``core.store``), the
business operations in ``services`` and the GraphQL binding in
``api/graphql``.  The service layer does not know about GraphQL, so
another protocol could be bound to it without touching the lookups.
"""

from .main import app  # noqa: F401
