"""
Pydantic models for author data.

An author only carries an identifier and a display name.  The list of
books written by an author is not stored on the record; it is derived
on demand from the book table by the service layer.
"""

from pydantic import BaseModel, Field


class AuthorRead(BaseModel):
    """Schema for reading an author."""

    id: int = Field(..., gt=0, examples=[1])
    name: str = Field(..., examples=["first author name"])

    model_config = {
        "frozen": True,
    }
