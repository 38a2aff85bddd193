"""Checkout stub: hands the cart total to a payment gateway.

The payment integration is unfinished: ``PaymentGateway.pay`` completes
immediately without any I/O, and the core only records whether the
completion signal arrived. There is no retry, receipt, or reconciliation.

Lifecycle: created -> payment_pending -> completed. Both non-terminal
states may also move to cancelled.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from patterns.domain_config import PaymentConfig
from verticals.bookstore.cart import Cart
from verticals.bookstore.models.schemas import PaymentOutcome

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Workflow states
# ---------------------------------------------------------------------------

class CheckoutState(str, Enum):
    CREATED = "created"
    PAYMENT_PENDING = "payment_pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# {current_state: [allowed_next_states]}
_TRANSITIONS: dict[CheckoutState, list[CheckoutState]] = {
    CheckoutState.CREATED: [CheckoutState.PAYMENT_PENDING, CheckoutState.CANCELLED],
    CheckoutState.PAYMENT_PENDING: [CheckoutState.COMPLETED, CheckoutState.CANCELLED],
    CheckoutState.COMPLETED: [],
    CheckoutState.CANCELLED: [],
}


@dataclass
class StateChange:
    """Record of a single checkout transition."""

    from_state: str
    to_state: str
    timestamp: datetime
    actor: str = "checkout"


@dataclass
class CheckoutSession:
    """One pass through the checkout sheet for a fixed amount."""

    amount: Decimal
    session_id: str = field(default_factory=lambda: f"CHK-{uuid.uuid4().hex[:8]}")
    state: CheckoutState = CheckoutState.CREATED
    history: list[StateChange] = field(default_factory=list)
    outcome: Optional[PaymentOutcome] = None

    def can_transition(self, to_state: CheckoutState) -> bool:
        return to_state in _TRANSITIONS[self.state]

    def transition(self, to_state: CheckoutState, actor: str = "checkout") -> StateChange:
        """Move to ``to_state``.

        Raises ValueError if the transition is not allowed.
        """
        if not self.can_transition(to_state):
            allowed = [s.value for s in _TRANSITIONS[self.state]]
            raise ValueError(
                f"Cannot transition from {self.state.value} to {to_state.value}. "
                f"Allowed: {allowed}"
            )
        change = StateChange(
            from_state=self.state.value,
            to_state=to_state.value,
            timestamp=datetime.now(timezone.utc),
            actor=actor,
        )
        self.history.append(change)
        self.state = to_state
        return change

    def cancel(self) -> StateChange:
        return self.transition(CheckoutState.CANCELLED, actor="customer")

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self.state]


# ---------------------------------------------------------------------------
# Payment gateway stub
# ---------------------------------------------------------------------------

class PaymentGateway:
    """Stand-in for the mobile payment provider."""

    def __init__(self, config: Optional[PaymentConfig] = None):
        self.config = config or PaymentConfig()

    async def pay(self, amount: Decimal) -> PaymentOutcome:
        """Accept ``amount`` and signal completion right away."""
        return PaymentOutcome(
            provider=self.config.provider,
            amount=amount,
            completed=True,
            sandbox=self.config.sandbox,
            reference=f"{self.config.provider.upper()}-{uuid.uuid4().hex[:12]}",
        )


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------

def start_checkout(cart: Cart) -> CheckoutSession:
    """Open a checkout session for the current cart total."""
    return CheckoutSession(amount=cart.total)


async def checkout(cart: Cart, gateway: PaymentGateway) -> CheckoutSession:
    """Pass the cart total to ``gateway`` and await its completion signal.

    The cart itself is left untouched.
    """
    session = start_checkout(cart)
    session.transition(CheckoutState.PAYMENT_PENDING)
    logger.info(
        "Checkout %s: requesting %s%s from %s",
        session.session_id,
        gateway.config.currency,
        session.amount,
        gateway.config.provider,
    )

    session.outcome = await gateway.pay(session.amount)

    if session.outcome.completed:
        session.transition(CheckoutState.COMPLETED, actor="payment_gateway")
    else:
        session.transition(CheckoutState.CANCELLED, actor="payment_gateway")
    logger.info("Checkout %s finished in state %s", session.session_id, session.state.value)
    return session
