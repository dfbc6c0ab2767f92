"""
Root query and mutation types.

Each field delegates to :class:`CatalogService`.  Single‑record lookups
return ``null`` when nothing matches; argument type errors are rejected
by the GraphQL validator before any resolver runs.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from catalog_api.app.schemas.book import BookCreate
from .types import Author, Book, get_service


@strawberry.type(description="Root Query")
class Query:
    @strawberry.field(description="List of Books")
    def books(self, info: Info) -> Optional[List[Optional[Book]]]:
        return [Book.from_schema(book) for book in get_service(info).list_books()]

    @strawberry.field(description="List of Authors")
    def authors(self, info: Info) -> Optional[List[Optional[Author]]]:
        return [Author.from_schema(author) for author in get_service(info).list_authors()]

    @strawberry.field(description="A Single Book")
    def book(self, info: Info, id: Optional[int] = None) -> Optional[Book]:
        book = get_service(info).get_book(id)
        return Book.from_schema(book) if book is not None else None

    @strawberry.field(description="A Single Author")
    def author(self, info: Info, id: Optional[int] = None) -> Optional[Author]:
        author = get_service(info).get_author(id)
        return Author.from_schema(author) if author is not None else None


@strawberry.type(description="Root Mutation")
class Mutation:
    @strawberry.mutation(description="add a book")
    def add_book(self, info: Info, name: str, author_id: int) -> Optional[Book]:
        book = get_service(info).add_book(BookCreate(name=name, author_id=author_id))
        return Book.from_schema(book)


schema = strawberry.Schema(query=Query, mutation=Mutation)
