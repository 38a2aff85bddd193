"""Test store configuration and wiring."""
from decimal import Decimal

from patterns.domain_config import FilterConfig, StoreConfig
from verticals.bookstore.config import build_storefront
from verticals.bookstore.models.schemas import QueryCriteria, SortOrder


def test_defaults_match_filter_sheet():
    config = StoreConfig.default()
    assert config.filters.price_ceiling == Decimal("100")
    assert config.filters.max_rating == 5.0
    assert config.search.recent_search_limit == 5


def test_from_env(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_PRICE_CEILING", "50")
    monkeypatch.setenv("BOOKSTORE_RECENT_SEARCH_LIMIT", "3")
    monkeypatch.setenv("BOOKSTORE_PAYMENT_SANDBOX", "false")
    config = StoreConfig.from_env()
    assert config.filters.price_ceiling == Decimal("50")
    assert config.search.recent_search_limit == 3
    assert config.payment.sandbox is False


def test_criteria_from_config():
    criteria = QueryCriteria.from_config(StoreConfig.default().filters, category="Science")
    assert criteria.category == "Science"
    assert criteria.price_max == Decimal("100")
    assert criteria.sort_order is SortOrder.BESTSELLING_DESC


def test_storefront_browse_and_search():
    store = build_storefront()
    assert len(store.browse()) == 16
    result = store.search("holmes")
    assert [b.id for b in result] == [13]
    assert store.recent_searches.entries() == ["holmes"]


def test_storefront_price_ceiling_applies(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_PRICE_CEILING", "15")
    store = build_storefront(StoreConfig.from_env())
    assert all(b.price <= Decimal("15") for b in store.browse())


def test_storefront_similar_items():
    store = build_storefront()
    assert [b.id for b in store.similar_items(4)] == [12]
    assert store.similar_items(999) == []


def test_storefront_sessions_are_independent():
    a = build_storefront()
    b = build_storefront()
    a.cart.add_to_cart(a.catalog.get_by_id(1))
    assert len(b.cart) == 0


def test_storefront_validates_rating_with_configured_scale():
    store = build_storefront(StoreConfig(filters=FilterConfig(max_rating=4.0)))
    assert store.browse(min_rating=4.5).error is not None
    assert store.browse(min_rating=4.0).ok


def test_storefront_zero_search_limit(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_RECENT_SEARCH_LIMIT", "0")
    store = build_storefront(StoreConfig.from_env())
    store.search("holmes")
    assert store.recent_searches.entries() == []
