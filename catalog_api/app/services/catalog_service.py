"""
Service layer for the author/book catalog.

All lookups are linear scans over the store's tables.  A lookup that
finds nothing returns ``None`` (or an empty list) rather than raising;
callers decide whether an absent record matters.  The only write is
:meth:`CatalogService.add_book`, which does not check that the author
exists.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from catalog_api.app.core.store import CatalogStore
from catalog_api.app.schemas.author import AuthorRead
from catalog_api.app.schemas.book import BookCreate, BookRead

logger = logging.getLogger(__name__)


class CatalogService:
    """Query and mutation operations over a :class:`CatalogStore`."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def list_books(self) -> List[BookRead]:
        """Return every book in insertion order."""
        return self.store.books()

    def list_authors(self) -> List[AuthorRead]:
        """Return every author in insertion order."""
        return self.store.authors()

    def get_book(self, book_id: Optional[int]) -> Optional[BookRead]:
        """Return the first book with ``book_id`` or ``None``.

        ``None`` as the id never matches a record.
        """
        logger.debug("Looking up book %s", book_id)
        return next((book for book in self.store.books() if book.id == book_id), None)

    def get_author(self, author_id: Optional[int]) -> Optional[AuthorRead]:
        """Return the first author with ``author_id`` or ``None``."""
        logger.debug("Looking up author %s", author_id)
        return next((author for author in self.store.authors() if author.id == author_id), None)

    def get_author_of_book(self, book: BookRead) -> Optional[AuthorRead]:
        # Dangling author_id yields None.
        return self.get_author(book.author_id)

    def list_books_by_author(self, author: AuthorRead) -> List[BookRead]:
        """Return the author's books in table order (possibly empty)."""
        return [book for book in self.store.books() if book.author_id == author.id]

    def add_book(self, data: BookCreate) -> BookRead:
        """Append a new book and return the created record.

        The id is derived from the current table length; see
        :meth:`CatalogStore.append_book`.
        """
        book = self.store.append_book(data.name, data.author_id)
        logger.info("Created book %s", book.id)
        return book
