"""Bookstore wiring.

Builds the catalog, cart, search history, and payment gateway once from a
``StoreConfig`` and hands them back together. Screens receive the
``Storefront`` (or the pieces they need) explicitly.
"""

from dataclasses import dataclass, field
from typing import Optional

from patterns.domain_config import StoreConfig
from verticals.bookstore.cart import Cart
from verticals.bookstore.checkout import PaymentGateway
from verticals.bookstore.models.schemas import QueryCriteria
from verticals.bookstore.query import QueryResult, query
from verticals.bookstore.repository import Catalog, default_catalog
from verticals.bookstore.search_history import RecentSearches


@dataclass
class Storefront:
    """Everything one UI session needs, constructed once."""

    config: StoreConfig
    catalog: Catalog
    cart: Cart = field(default_factory=Cart)
    recent_searches: RecentSearches = field(default_factory=RecentSearches)
    gateway: Optional[PaymentGateway] = None

    def default_criteria(self, **overrides) -> QueryCriteria:
        return QueryCriteria.from_config(self.config.filters, **overrides)

    def browse(self, **overrides) -> QueryResult:
        """Query the catalog starting from the filter sheet defaults."""
        return query(self.catalog, self.default_criteria(**overrides), self.config.filters)

    def search(self, text: str, **overrides) -> QueryResult:
        """Text search over title/author; remembers the search string."""
        self.recent_searches.record(text)
        return self.browse(search_text=text, **overrides)

    def similar_items(self, item_id: int):
        item = self.catalog.get_by_id(item_id)
        if item is None:
            return []
        return self.catalog.similar_items(item, limit=self.config.search.similar_items_limit)


def build_storefront(
    config: Optional[StoreConfig] = None,
    catalog: Optional[Catalog] = None,
) -> Storefront:
    config = config or StoreConfig.default()
    return Storefront(
        config=config,
        catalog=catalog if catalog is not None else default_catalog(),
        recent_searches=RecentSearches(limit=config.search.recent_search_limit),
        gateway=PaymentGateway(config.payment),
    )
