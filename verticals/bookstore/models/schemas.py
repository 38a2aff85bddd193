"""Pydantic schemas for catalog items, query criteria, and cart summaries."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from patterns.domain_config import FilterConfig


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Category(str, Enum):
    FICTION = "Fiction"
    NON_FICTION = "Non-Fiction"
    MYSTERY = "Mystery"
    SCIENCE_FICTION = "Science Fiction"
    ROMANCE = "Romance"
    THRILLER = "Thriller"
    BIOGRAPHY = "Biography"
    HISTORY = "History"
    SCIENCE = "Science"
    TECHNOLOGY = "Technology"


ALL_CATEGORIES = "All Books"

# Accepted spellings of the "no category filter" sentinel (lowercased)
_ALL_CATEGORY_ALIASES = {"all", "all books"}


def is_all_categories(category: Optional[str]) -> bool:
    """True when ``category`` is the sentinel. Blank is not the sentinel."""
    return (category or "").strip().lower() in _ALL_CATEGORY_ALIASES


class SortOrder(str, Enum):
    PRICE_DESC = "price_desc"
    PRICE_ASC = "price_asc"
    RATING_DESC = "rating_desc"
    NEWEST = "newest"
    BESTSELLING_DESC = "bestselling_desc"


class ErrorCode(str, Enum):
    # Missing catalog items are reported as None, not as an error code
    INVALID_RANGE = "invalid_range"


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class CatalogItem(BaseModel):
    """A purchasable book. Built once from the seed list, never mutated."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    title: str
    author: str
    price: Decimal = Field(..., ge=0)
    image: str = ""
    category: str
    description: str = ""
    rating: float = Field(0.0, ge=0, le=5)
    reviews: int = Field(0, ge=0)
    is_available: bool = True

    @field_validator("category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        if value not in {c.value for c in Category}:
            raise ValueError(f"Unknown category: {value}")
        return value


# ---------------------------------------------------------------------------
# Query criteria
# ---------------------------------------------------------------------------

class QueryCriteria(BaseModel):
    """Combined filter/sort/search parameters for a catalog query.

    Range fields carry no constraints here: out-of-range values are
    reported by the query engine as an ``INVALID_RANGE`` result instead
    of failing construction.
    """

    model_config = ConfigDict(frozen=True)

    category: str = ALL_CATEGORIES
    price_min: Decimal = Decimal("0")
    price_max: Decimal = Decimal("100")
    min_rating: float = 0.0
    search_text: str = ""
    sort_order: SortOrder = SortOrder.BESTSELLING_DESC

    @classmethod
    def from_config(cls, filters: FilterConfig, **overrides) -> "QueryCriteria":
        """Criteria preset to the filter sheet defaults of ``filters``."""
        values = {
            "category": filters.all_categories_label,
            "price_min": filters.price_floor,
            "price_max": filters.price_ceiling,
            "min_rating": filters.min_rating,
            "sort_order": SortOrder(filters.default_sort),
        }
        values.update(overrides)
        return cls(**values)


# ---------------------------------------------------------------------------
# Cart / checkout
# ---------------------------------------------------------------------------

class CartSummaryLine(BaseModel):
    item_id: int
    unit_price: Decimal
    quantity: int
    line_total: Decimal


class CartSummary(BaseModel):
    """Snapshot handed to the checkout surface."""

    lines: list[CartSummaryLine] = Field(default_factory=list)
    line_count: int = 0
    item_count: int = 0
    total: Decimal = Decimal("0")


class PaymentOutcome(BaseModel):
    provider: str
    amount: Decimal
    completed: bool
    sandbox: bool = True
    reference: Optional[str] = None
