"""Test checkout stub and its state machine."""
from decimal import Decimal

import pytest

from patterns.domain_config import PaymentConfig
from verticals.bookstore.cart import Cart
from verticals.bookstore.checkout import (
    CheckoutSession, CheckoutState, PaymentGateway, checkout, start_checkout,
)
from verticals.bookstore.config import build_storefront
from verticals.bookstore.repository import default_catalog


def _filled_cart():
    catalog = default_catalog()
    cart = Cart()
    cart.add_to_cart(catalog.get_by_id(1))
    cart.add_to_cart(catalog.get_by_id(1))
    cart.add_to_cart(catalog.get_by_id(5))
    return cart


@pytest.mark.asyncio
async def test_checkout_passes_cart_total():
    cart = _filled_cart()
    session = await checkout(cart, PaymentGateway())
    assert session.amount == Decimal("35.97")
    assert session.outcome.amount == Decimal("35.97")
    assert session.outcome.completed
    assert session.state == CheckoutState.COMPLETED
    assert session.is_terminal
    assert [h.to_state for h in session.history] == ["payment_pending", "completed"]


@pytest.mark.asyncio
async def test_checkout_leaves_cart_untouched():
    cart = _filled_cart()
    await checkout(cart, PaymentGateway())
    assert len(cart) == 2
    assert cart.total == Decimal("35.97")


@pytest.mark.asyncio
async def test_gateway_uses_config():
    gateway = PaymentGateway(PaymentConfig(provider="demo", sandbox=False))
    outcome = await gateway.pay(Decimal("10"))
    assert outcome.provider == "demo"
    assert not outcome.sandbox
    assert outcome.reference.startswith("DEMO-")


def test_cancel_before_payment():
    session = start_checkout(_filled_cart())
    assert session.state == CheckoutState.CREATED
    session.cancel()
    assert session.state == CheckoutState.CANCELLED
    assert session.is_terminal


def test_illegal_transition_raises():
    session = CheckoutSession(amount=Decimal("1"))
    with pytest.raises(ValueError, match="Cannot transition"):
        session.transition(CheckoutState.COMPLETED)


def test_terminal_state_has_no_exits():
    session = CheckoutSession(amount=Decimal("1"))
    session.transition(CheckoutState.PAYMENT_PENDING)
    session.transition(CheckoutState.COMPLETED)
    assert not session.can_transition(CheckoutState.CANCELLED)


@pytest.mark.asyncio
async def test_storefront_gateway_checkout():
    store = build_storefront()
    store.cart.add_to_cart(store.catalog.get_by_id(14))
    session = await checkout(store.cart, store.gateway)
    assert session.amount == Decimal("29.99")
    assert session.outcome.provider == "phonepe"
