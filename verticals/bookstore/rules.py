"""Bookstore business rules: pure functions.

Re-exports the rules engine pieces the bookstore core uses.
"""

from patterns.rules_engine import (
    RuleResult,
    RuleSetResult,
    check_item_available,
    check_price_range,
    check_rating_range,
    evaluate_rules,
)

__all__ = [
    "RuleResult",
    "RuleSetResult",
    "check_item_available",
    "check_price_range",
    "check_rating_range",
    "evaluate_rules",
]
