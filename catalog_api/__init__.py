"""
Catalog API: authors and books served over GraphQL.

The importable application lives in ``catalog_api.app``; this top-level
package only groups it and exports nothing itself.
"""

__all__ = []
