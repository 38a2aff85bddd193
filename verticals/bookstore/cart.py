"""Cart aggregator: item id to quantity, with a running total.

A plain mutable store: the presentation layer calls the mutators in
response to gestures and reads ``lines`` / ``total`` to render. Calls are
expected to be serialized by the caller. The cart lives as long as the
process (or UI session); nothing is persisted.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from verticals.bookstore.models.schemas import CartSummary, CartSummaryLine, CatalogItem

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    """One (item, quantity) pairing. Quantity is always positive."""

    item_id: int
    unit_price: Decimal
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class Cart:
    """Shopping cart keyed by catalog item id.

    Usage::

        cart = Cart()
        cart.add_to_cart(book)
        cart.update_quantity(book.id, 3)
        print(cart.total)
    """

    def __init__(self):
        self._lines: dict[int, CartLine] = {}

    # -- Mutators --

    def add_to_cart(self, item: CatalogItem) -> CartLine:
        """Add one unit of ``item``; merges with an existing line.

        Availability is not enforced here.
        """
        if not item.is_available:
            logger.warning("Adding unavailable item %s (%s) to cart", item.id, item.title)

        line = self._lines.get(item.id)
        if line is None:
            line = CartLine(item_id=item.id, unit_price=item.price)
            self._lines[item.id] = line
        else:
            line.quantity += 1
        return line

    def remove_from_cart(self, item_id: int) -> bool:
        """Drop the line for ``item_id``. Returns False if there was none."""
        return self._lines.pop(item_id, None) is not None

    def update_quantity(self, item_id: int, quantity: int) -> Optional[CartLine]:
        """Set the quantity of an existing line.

        ``quantity <= 0`` removes the line. An id that was never added is
        left alone and None is returned; no line is created.
        """
        if quantity <= 0:
            self.remove_from_cart(item_id)
            return None

        line = self._lines.get(item_id)
        if line is None:
            logger.debug("update_quantity ignored for item %s: not in cart", item_id)
            return None
        line.quantity = quantity
        return line

    def clear_cart(self) -> None:
        self._lines.clear()

    # -- Reads --

    @property
    def lines(self) -> list[CartLine]:
        """Lines in the order items were first added."""
        return list(self._lines.values())

    def get_line(self, item_id: int) -> Optional[CartLine]:
        return self._lines.get(item_id)

    @property
    def total(self) -> Decimal:
        """Sum of line totals, recomputed on every read."""
        return sum((line.line_total for line in self._lines.values()), Decimal("0"))

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def summary(self) -> CartSummary:
        """Snapshot for the checkout surface."""
        return CartSummary(
            lines=[
                CartSummaryLine(
                    item_id=line.item_id,
                    unit_price=line.unit_price,
                    quantity=line.quantity,
                    line_total=line.line_total,
                )
                for line in self._lines.values()
            ],
            line_count=len(self._lines),
            item_count=self.item_count,
            total=self.total,
        )

    def __len__(self) -> int:
        """Number of distinct lines (the cart badge count)."""
        return len(self._lines)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._lines
