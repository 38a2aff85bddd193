"""Pure-function rules engine pattern.

Rules are stateless functions: (value, context) -> RuleResult.
No I/O, no side effects. Validation failures come back as values the
caller inspects, never as exceptions used for control flow.

Example domain: a bookstore validating query criteria and item availability.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0

    @property
    def messages(self) -> list[str]:
        """Messages of the failed rules, in evaluation order."""
        return [r.message for r in self.failed]


# ---------------------------------------------------------------------------
# Bookstore rules
# ---------------------------------------------------------------------------

def check_price_range(price_min: Decimal, price_max: Decimal) -> RuleResult:
    """Both bounds must be non-negative and ordered (inclusive range)."""
    reasons = []
    if price_min < 0:
        reasons.append(f"Minimum price {price_min} is negative")
    if price_max < 0:
        reasons.append(f"Maximum price {price_max} is negative")
    if price_min > price_max:
        reasons.append(f"Minimum price {price_min} exceeds maximum price {price_max}")

    return RuleResult(
        passed=not reasons,
        rule_name="price_range",
        message="Price range is valid" if not reasons else "; ".join(reasons),
        details={"price_min": price_min, "price_max": price_max},
    )


def check_rating_range(
    min_rating: float,
    lowest: float = 0.0,
    highest: float = 5.0,
) -> RuleResult:
    """Minimum rating must fall inside the rating scale."""
    passed = lowest <= min_rating <= highest

    return RuleResult(
        passed=passed,
        rule_name="rating_range",
        message=(
            "Rating filter is valid"
            if passed
            else f"Minimum rating {min_rating} outside [{lowest}, {highest}]"
        ),
        details={"min_rating": min_rating, "lowest": lowest, "highest": highest},
    )


def check_item_available(item: Any) -> RuleResult:
    """Check the availability flag of a catalog item.

    The cart does not enforce this rule; callers that want to block
    unavailable items evaluate it before adding.
    """
    available = bool(getattr(item, "is_available", False))

    return RuleResult(
        passed=available,
        rule_name="item_available",
        message=(
            f"'{item.title}' is available"
            if available
            else f"'{item.title}' is currently unavailable"
        ),
        details={"item_id": item.id, "is_available": available},
    )


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(
            check_price_range(criteria.price_min, criteria.price_max),
            check_rating_range(criteria.min_rating),
        )
        if not result.all_passed:
            show_message(result.messages)
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )
