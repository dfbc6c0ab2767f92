"""
In‑memory record store.

``CatalogStore`` owns the two tables (authors and books) the service
layer queries.  Nothing is persisted: a store starts either empty or
pre‑filled with the seed records via :meth:`CatalogStore.seeded`, and
everything added afterwards is lost when the process exits.

Each application instance owns its own store, so tests can build a
fresh one per case instead of resetting module globals.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from catalog_api.app.schemas.author import AuthorRead
from catalog_api.app.schemas.book import BookRead

SEED_AUTHORS = (
    {"id": 1, "name": "first author name"},
    {"id": 2, "name": "second author name"},
    {"id": 3, "name": "third author name"},
    {"id": 4, "name": "fourth author name"},
)

SEED_BOOKS = (
    {"id": 1, "name": "first book name", "author_id": 1},
    {"id": 2, "name": "second book name", "author_id": 1},
    {"id": 3, "name": "3rd book name", "author_id": 1},
    {"id": 4, "name": "4th book name", "author_id": 2},
    {"id": 5, "name": "5th book name", "author_id": 2},
    {"id": 6, "name": "6th book name", "author_id": 2},
    {"id": 7, "name": "7th book name", "author_id": 3},
    {"id": 8, "name": "8th book name", "author_id": 3},
)


class CatalogStore:
    """Holds the author and book tables in insertion order."""

    def __init__(
        self,
        authors: Optional[Iterable[AuthorRead]] = None,
        books: Optional[Iterable[BookRead]] = None,
    ) -> None:
        self._authors: List[AuthorRead] = list(authors or [])
        self._books: List[BookRead] = list(books or [])
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "CatalogStore":
        """Return a store filled with the fixed demo records."""
        return cls(
            authors=[AuthorRead(**row) for row in SEED_AUTHORS],
            books=[BookRead(**row) for row in SEED_BOOKS],
        )

    def authors(self) -> List[AuthorRead]:
        """Return a snapshot of the author table."""
        return list(self._authors)

    def books(self) -> List[BookRead]:
        """Return a snapshot of the book table."""
        return list(self._books)

    def append_book(self, name: str, author_id: int) -> BookRead:
        """Append a new book and return it.

        The identifier is the table length plus one.  This is not a
        running maximum: a store built with gaps or out‑of‑order ids can
        hand out an id that is already taken.
        """
        with self._lock:
            book = BookRead(id=len(self._books) + 1, name=name, author_id=author_id)
            self._books.append(book)
        return book
