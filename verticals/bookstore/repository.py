"""Bookstore catalog: in-memory, immutable item collection.

Holds the seed list the storefront ships with and exposes lookups by id,
"similar books" for the detail screen, and the categories in use. There is
no database: the catalog is built once at start-up and passed by reference
to the query engine and the screens.
"""

import logging
from decimal import Decimal
from typing import Iterable, Iterator, Optional

from verticals.bookstore.models.schemas import CatalogItem

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_SEED_BOOKS = [
    {"id": 1, "title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "price": "12.99", "image": "https://images.unsplash.com/photo-1544947950-fa07a98d237f", "category": "Fiction", "description": "A story of the fabulously wealthy Jay Gatsby and his love for the beautiful Daisy Buchanan, set against the backdrop of the roaring twenties.", "rating": 4.5, "reviews": 2547},
    {"id": 2, "title": "1984", "author": "George Orwell", "price": "14.99", "image": "https://images.unsplash.com/photo-1541963463532-d68292c34b19", "category": "Fiction", "description": "A dystopian social science fiction novel that follows Winston Smith's rebellion against a totalitarian regime.", "rating": 4.8, "reviews": 3256},
    {"id": 3, "title": "To Kill a Mockingbird", "author": "Harper Lee", "price": "11.99", "image": "https://images.unsplash.com/photo-1543002588-bfa74002ed7e", "category": "Fiction", "description": "A story of racial injustice and the loss of innocence in the American South, told through the eyes of young Scout Finch.", "rating": 4.7, "reviews": 2980},
    {"id": 4, "title": "A Brief History of Time", "author": "Stephen Hawking", "price": "18.99", "image": "https://images.unsplash.com/photo-1546521343-4eb2c9aa8454", "category": "Science", "description": "An exploration of cosmology, from the Big Bang to black holes, written for the general reader.", "rating": 4.6, "reviews": 1875},
    {"id": 5, "title": "Pride and Prejudice", "author": "Jane Austen", "price": "9.99", "image": "https://images.unsplash.com/photo-1544716278-ca5e3f4abd8c", "category": "Romance", "description": "The tale of Elizabeth Bennet and Mr. Darcy, as they overcome their pride and prejudices in Regency-era England.", "rating": 4.4, "reviews": 2156},
    {"id": 6, "title": "The Da Vinci Code", "author": "Dan Brown", "price": "15.99", "image": "https://images.unsplash.com/photo-1589829085413-56de8ae18c73", "category": "Mystery", "description": "A thrilling mystery that follows Robert Langdon as he uncovers religious conspiracies in modern-day Europe.", "rating": 4.2, "reviews": 3421},
    {"id": 7, "title": "The Sapiens", "author": "Yuval Noah Harari", "price": "21.99", "image": "https://images.unsplash.com/photo-1544947950-fa07a98d237f", "category": "Non-Fiction", "description": "A brief history of humankind, exploring how we became the dominant species on Earth.", "rating": 4.8, "reviews": 4521},
    {"id": 8, "title": "The Alchemist", "author": "Paulo Coelho", "price": "13.99", "image": "https://images.unsplash.com/photo-1589829085413-56de8ae18c73", "category": "Fiction", "description": "A philosophical novel about a young shepherd who dreams of finding treasure in Egypt.", "rating": 4.6, "reviews": 3254},
    {"id": 9, "title": "Artificial Intelligence Basics", "author": "Tom Taulli", "price": "24.99", "image": "https://images.unsplash.com/photo-1546521343-4eb2c9aa8454", "category": "Technology", "description": "An introduction to AI and its applications in modern technology.", "rating": 4.3, "reviews": 890},
    {"id": 10, "title": "The Silent Patient", "author": "Alex Michaelides", "price": "16.99", "image": "https://images.unsplash.com/photo-1543002588-bfa74002ed7e", "category": "Thriller", "description": "A psychological thriller about a woman's act of violence against her husband.", "rating": 4.5, "reviews": 2876},
    {"id": 11, "title": "Steve Jobs", "author": "Walter Isaacson", "price": "19.99", "image": "https://images.unsplash.com/photo-1544716278-ca5e3f4abd8c", "category": "Biography", "description": "The exclusive biography of Apple's innovative co-founder.", "rating": 4.7, "reviews": 3421},
    {"id": 12, "title": "The Quantum World", "author": "Kenneth W. Ford", "price": "22.99", "image": "https://images.unsplash.com/photo-1589829085413-56de8ae18c73", "category": "Science", "description": "An accessible introduction to quantum physics and its mysteries.", "rating": 4.4, "reviews": 756},
    {"id": 13, "title": "The Sherlock Holmes Collection", "author": "Arthur Conan Doyle", "price": "25.99", "image": "https://images.unsplash.com/photo-1544947950-fa07a98d237f", "category": "Mystery", "description": "Complete collection of Sherlock Holmes adventures.", "rating": 4.9, "reviews": 5234},
    {"id": 14, "title": "Clean Code", "author": "Robert C. Martin", "price": "29.99", "image": "https://images.unsplash.com/photo-1546521343-4eb2c9aa8454", "category": "Technology", "description": "A handbook of agile software craftsmanship.", "rating": 4.8, "reviews": 2345},
    {"id": 15, "title": "The Love Hypothesis", "author": "Ali Hazelwood", "price": "14.99", "image": "https://images.unsplash.com/photo-1543002588-bfa74002ed7e", "category": "Romance", "description": "A contemporary romance set in the world of academia.", "rating": 4.3, "reviews": 1567},
    {"id": 16, "title": "Gone Girl", "author": "Gillian Flynn", "price": "15.99", "image": "https://images.unsplash.com/photo-1589829085413-56de8ae18c73", "category": "Thriller", "description": "A gripping psychological thriller about a missing woman and her suspicious husband.", "rating": 4.6, "reviews": 4231},
]


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Catalog:
    """Ordered, read-only collection of catalog items.

    Identifiers must be unique for the lifetime of the catalog; a
    duplicate is a seed-data bug and fails construction::

        catalog = Catalog(items)
        book = catalog.get_by_id(7)
        if book is None:
            ...  # not found
    """

    def __init__(self, items: Iterable[CatalogItem]):
        self._items: tuple[CatalogItem, ...] = tuple(items)
        self._by_id: dict[int, CatalogItem] = {}
        for item in self._items:
            if item.id in self._by_id:
                raise ValueError(f"Duplicate catalog item id: {item.id}")
            self._by_id[item.id] = item

    # -- Lookup --

    def get_by_id(self, item_id: int) -> Optional[CatalogItem]:
        """Return the item with ``item_id``, or None when absent."""
        item = self._by_id.get(item_id)
        if item is None:
            logger.debug("Catalog item %s not found", item_id)
        return item

    def similar_items(self, item: CatalogItem, limit: int = 5) -> list[CatalogItem]:
        """Other items in the same category, in catalog order."""
        similar = [
            other for other in self._items
            if other.category == item.category and other.id != item.id
        ]
        return similar[:max(0, limit)]

    def categories(self) -> list[str]:
        """Categories present in the catalog, first-seen order."""
        seen: list[str] = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return seen

    # -- Container protocol --

    @property
    def items(self) -> tuple[CatalogItem, ...]:
        return self._items

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id


def load_seed_items() -> list[CatalogItem]:
    """Build fresh CatalogItem instances from the seed list."""
    return [
        CatalogItem(**{**entry, "price": Decimal(entry["price"])})
        for entry in _SEED_BOOKS
    ]


def default_catalog() -> Catalog:
    """The catalog the storefront ships with."""
    catalog = Catalog(load_seed_items())
    logger.info("Loaded catalog with %d items", len(catalog))
    return catalog
