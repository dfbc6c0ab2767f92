"""
Pydantic models for book data.

``BookCreate`` holds the arguments of the add‑book mutation and
``BookRead`` a stored record.  ``author_id`` refers to ``AuthorRead.id``
but the reference is not checked; a book may point at an author that
does not exist.
"""

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    name: str = Field(..., examples=["first book name"])
    author_id: int = Field(..., examples=[1])


class BookCreate(BookBase):
    """Schema for creating a book."""
    pass


class BookRead(BookBase):
    """Schema for reading a book."""

    id: int = Field(..., gt=0, examples=[1])

    model_config = {
        "frozen": True,
    }
