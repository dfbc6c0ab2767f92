from catalog_api.app.core.store import SEED_AUTHORS, SEED_BOOKS, CatalogStore
from catalog_api.app.schemas.author import AuthorRead
from catalog_api.app.schemas.book import BookRead


def test_seeded_store_matches_seed_tables(store):
    assert [a.id for a in store.authors()] == [1, 2, 3, 4]
    assert [b.id for b in store.books()] == list(range(1, 9))
    assert store.authors()[3].name == "fourth author name"
    assert store.books()[2] == BookRead(id=3, name="3rd book name", author_id=1)
    assert len(SEED_AUTHORS) == 4
    assert len(SEED_BOOKS) == 8


def test_empty_store():
    store = CatalogStore()
    assert store.authors() == []
    assert store.books() == []


def test_snapshots_do_not_alias_tables(store):
    snapshot = store.books()
    snapshot.clear()
    assert len(store.books()) == 8


def test_seeded_stores_are_independent():
    first = CatalogStore.seeded()
    second = CatalogStore.seeded()
    first.append_book("Only here", 1)
    assert len(first.books()) == 9
    assert len(second.books()) == 8


def test_append_book_uses_length_plus_one(store):
    book = store.append_book("New Title", 2)
    assert book == BookRead(id=9, name="New Title", author_id=2)
    assert store.books()[-1] == book


def test_append_book_id_can_collide_after_gap():
    # Ids follow the table length, not the highest id in use.
    store = CatalogStore(
        authors=[AuthorRead(id=1, name="a")],
        books=[BookRead(id=5, name="x", author_id=1)],
    )
    book = store.append_book("y", 1)
    assert book.id == 2

    store = CatalogStore(books=[BookRead(id=2, name="x", author_id=1)])
    assert store.append_book("y", 1).id == 2
