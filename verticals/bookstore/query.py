"""Catalog query engine: filter, search, and sort.

``query(catalog, criteria)`` validates the criteria with the rules engine,
keeps the items matching every criterion (logical AND), then applies a
stable sort. The input catalog is never mutated; each call returns a new
list inside a ``QueryResult``.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from patterns.domain_config import FilterConfig
from patterns.rules_engine import (
    RuleSetResult,
    check_price_range,
    check_rating_range,
    evaluate_rules,
)
from verticals.bookstore.models.schemas import (
    CatalogItem,
    ErrorCode,
    QueryCriteria,
    SortOrder,
    is_all_categories,
)

logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------

@dataclass
class QueryResult:
    """Ordered items plus the validation outcome of the criteria."""

    items: list[CatalogItem]
    validation: RuleSetResult
    error: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def matches_category(item: CatalogItem, category: str) -> bool:
    if is_all_categories(category):
        return True
    return _norm(item.category) == _norm(category)


def matches_price(item: CatalogItem, criteria: QueryCriteria) -> bool:
    return criteria.price_min <= item.price <= criteria.price_max


def matches_rating(item: CatalogItem, min_rating: float) -> bool:
    return item.rating >= min_rating


def matches_text(item: CatalogItem, search_text: str) -> bool:
    """Case-insensitive substring of title or author; the text is used as given."""
    if not search_text:
        return True
    needle = search_text.lower()
    return needle in item.title.lower() or needle in item.author.lower()


def matches(item: CatalogItem, criteria: QueryCriteria) -> bool:
    """Combined predicate: every criterion must hold."""
    return (
        matches_category(item, criteria.category)
        and matches_price(item, criteria)
        and matches_rating(item, criteria.min_rating)
        and matches_text(item, criteria.search_text)
    )


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

# (key, reverse) per sort order; None means keep filtered order.
# list.sort is stable for reverse=True as well, so ties keep catalog order.
_SORT_KEYS: dict[SortOrder, Optional[tuple[Callable[[CatalogItem], object], bool]]] = {
    SortOrder.PRICE_DESC: (lambda b: b.price, True),
    SortOrder.PRICE_ASC: (lambda b: b.price, False),
    SortOrder.RATING_DESC: (lambda b: b.rating, True),
    SortOrder.BESTSELLING_DESC: (lambda b: b.reviews, True),
    SortOrder.NEWEST: None,  # no creation timestamp on items
}


def sort_items(items: list[CatalogItem], order: SortOrder) -> list[CatalogItem]:
    """Return a stably sorted copy of ``items``."""
    ordered = list(items)
    sort_key = _SORT_KEYS[SortOrder(order)]
    if sort_key is not None:
        key, reverse = sort_key
        ordered.sort(key=key, reverse=reverse)
    return ordered


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------

def validate_criteria(
    criteria: QueryCriteria,
    filters: Optional[FilterConfig] = None,
) -> RuleSetResult:
    """Run the range rules over ``criteria`` using the rating scale of ``filters``."""
    filters = filters or FilterConfig()
    return evaluate_rules(
        check_price_range(criteria.price_min, criteria.price_max),
        check_rating_range(criteria.min_rating, filters.min_rating, filters.max_rating),
    )


def query(
    catalog: Iterable[CatalogItem],
    criteria: QueryCriteria,
    filters: Optional[FilterConfig] = None,
) -> QueryResult:
    """Filter and sort ``catalog`` according to ``criteria``.

    Invalid ranges are reported as ``ErrorCode.INVALID_RANGE`` with an
    empty item list; this function does not raise for bad criteria.
    """
    validation = validate_criteria(criteria, filters)
    if not validation.all_passed:
        logger.warning("Rejected catalog query: %s", "; ".join(validation.messages))
        return QueryResult(items=[], validation=validation, error=ErrorCode.INVALID_RANGE)

    filtered = [item for item in catalog if matches(item, criteria)]
    ordered = sort_items(filtered, criteria.sort_order)

    logger.debug(
        "Catalog query category=%r search=%r sort=%s -> %d items",
        criteria.category,
        criteria.search_text,
        criteria.sort_order.value,
        len(ordered),
    )
    return QueryResult(items=ordered, validation=validation)
