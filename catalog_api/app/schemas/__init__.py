"""
Pydantic schema definitions for catalog records.

Records are kept as validated pydantic models inside the store and
handed to the GraphQL layer, which maps them onto its own types.
"""
