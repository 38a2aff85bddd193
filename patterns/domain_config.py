"""Dataclass-based domain configuration pattern.

The storefront defines its filter bounds, limits, and payment flags as a
frozen dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values matching the storefront screens
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides from env vars

The config object is built once at start-up and passed to whatever needs
it; nothing looks it up globally.
"""

import os
from dataclasses import dataclass, field
from decimal import Decimal


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FilterConfig:
    """Bounds and defaults of the category filter sheet."""

    price_floor: Decimal = Decimal("0")
    price_ceiling: Decimal = Decimal("100")  # price slider max
    min_rating: float = 0.0
    max_rating: float = 5.0
    all_categories_label: str = "All Books"
    default_sort: str = "bestselling_desc"


@dataclass(frozen=True)
class SearchConfig:
    """Search screen and detail screen limits."""

    recent_search_limit: int = 5
    similar_items_limit: int = 5


@dataclass(frozen=True)
class PaymentConfig:
    """Payment provider stub settings."""

    provider: str = "phonepe"
    sandbox: bool = True
    currency: str = "$"


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StoreConfig:
    """Complete configuration for the bookstore core.

    Usage::

        config = StoreConfig.default()
        criteria = QueryCriteria.from_config(config.filters)
    """

    filters: FilterConfig = field(default_factory=FilterConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    payment: PaymentConfig = field(default_factory=PaymentConfig)

    @classmethod
    def default(cls) -> "StoreConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "BOOKSTORE_") -> "StoreConfig":
        """Create config from environment variables.

        Example: BOOKSTORE_RECENT_SEARCH_LIMIT=10
        """
        filter_overrides = {}
        price_ceiling = os.getenv(f"{prefix}PRICE_CEILING")
        if price_ceiling:
            filter_overrides["price_ceiling"] = Decimal(price_ceiling)

        search_overrides = {}
        recent = os.getenv(f"{prefix}RECENT_SEARCH_LIMIT")
        if recent:
            search_overrides["recent_search_limit"] = int(recent)
        similar = os.getenv(f"{prefix}SIMILAR_ITEMS_LIMIT")
        if similar:
            search_overrides["similar_items_limit"] = int(similar)

        payment_overrides = {}
        sandbox = os.getenv(f"{prefix}PAYMENT_SANDBOX")
        if sandbox:
            payment_overrides["sandbox"] = sandbox.lower() == "true"

        return cls(
            filters=FilterConfig(**filter_overrides),
            search=SearchConfig(**search_overrides),
            payment=PaymentConfig(**payment_overrides),
        )
