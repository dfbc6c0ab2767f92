"""
Strawberry object types for books and authors.

Scalar fields are copied from the pydantic records, and the record
itself is kept as a private attribute hidden from the schema.  The relation
fields (``Book.author`` and ``Author.books``) are resolved on demand
through the :class:`CatalogService` placed in the request context, so
they are only computed when a query selects them.
"""

from __future__ import annotations

from typing import List, Optional

import strawberry
from strawberry.types import Info

from catalog_api.app.schemas.author import AuthorRead
from catalog_api.app.schemas.book import BookRead
from catalog_api.app.services.catalog_service import CatalogService


def get_service(info: Info) -> CatalogService:
    """Return the catalog service bound to the current request."""
    return info.context["service"]


@strawberry.type(description="This represents a book")
class Book:
    id: int
    name: str
    author_id: int
    record: strawberry.Private[BookRead]

    @strawberry.field
    def author(self, info: Info) -> Optional[Author]:
        author = get_service(info).get_author_of_book(self.record)
        return Author.from_schema(author) if author is not None else None

    @classmethod
    def from_schema(cls, book: BookRead) -> "Book":
        return cls(id=book.id, name=book.name, author_id=book.author_id, record=book)


@strawberry.type(description="This represents a author")
class Author:
    id: int
    name: str
    record: strawberry.Private[AuthorRead]

    @strawberry.field
    def books(self, info: Info) -> Optional[List[Optional[Book]]]:
        books = get_service(info).list_books_by_author(self.record)
        return [Book.from_schema(book) for book in books]

    @classmethod
    def from_schema(cls, author: AuthorRead) -> "Author":
        return cls(id=author.id, name=author.name, record=author)
