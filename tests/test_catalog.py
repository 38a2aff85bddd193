"""Test in-memory catalog: seed data, lookups, similar items."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from verticals.bookstore.models.schemas import CatalogItem
from verticals.bookstore.repository import Catalog, default_catalog, load_seed_items


def test_seed_catalog_size_and_unique_ids():
    catalog = default_catalog()
    assert len(catalog) == 16
    assert len({b.id for b in catalog}) == 16


def test_get_by_id_found():
    book = default_catalog().get_by_id(14)
    assert book is not None
    assert book.title == "Clean Code"
    assert book.price == Decimal("29.99")


def test_get_by_id_not_found_returns_none():
    catalog = default_catalog()
    assert catalog.get_by_id(999) is None
    assert 999 not in catalog


def test_duplicate_ids_rejected():
    items = load_seed_items()
    with pytest.raises(ValueError, match="Duplicate catalog item id"):
        Catalog(items + [items[0]])


def test_items_are_immutable():
    book = default_catalog().get_by_id(1)
    with pytest.raises(ValidationError):
        book.price = Decimal("1.00")


def test_item_constraints():
    with pytest.raises(ValidationError):
        CatalogItem(id=0, title="x", author="y", price=Decimal("1"), category="Fiction")
    with pytest.raises(ValidationError):
        CatalogItem(id=1, title="x", author="y", price=Decimal("-1"), category="Fiction")
    with pytest.raises(ValidationError):
        CatalogItem(id=1, title="x", author="y", price=Decimal("1"), category="Fiction", rating=6)


def test_similar_items_same_category_excluding_self():
    catalog = default_catalog()
    book = catalog.get_by_id(1)
    similar = catalog.similar_items(book)
    assert [b.id for b in similar] == [2, 3, 8]


def test_similar_items_limit():
    catalog = default_catalog()
    assert len(catalog.similar_items(catalog.get_by_id(1), limit=2)) == 2
    assert catalog.similar_items(catalog.get_by_id(1), limit=0) == []


def test_categories_in_first_seen_order():
    assert default_catalog().categories() == [
        "Fiction", "Science", "Romance", "Mystery", "Non-Fiction",
        "Technology", "Thriller", "Biography",
    ]


def test_item_category_must_be_known_label():
    with pytest.raises(ValidationError):
        CatalogItem(id=1, title="x", author="y", price=Decimal("1"), category="Poetry")
