"""Numeric range predicates."""

from typing import Any

from chainval.predicates import comparisons
from chainval.predicates.predicate import Predicate


def inside(start: Any, end: Any) -> Predicate:
    """True when ``start <= value <= end``."""
    return comparisons.ge(start) & comparisons.le(end)


def outside(start: Any, end: Any) -> Predicate:
    """True when the value is below ``start`` or above ``end``."""
    return comparisons.lt(start) | comparisons.gt(end)


def strict_inside(start: Any, end: Any) -> Predicate:
    """True when ``start < value < end``."""
    return comparisons.gt(start) & comparisons.lt(end)
