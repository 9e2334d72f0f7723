"""Date and time range predicates.

Work with any mutually comparable values: ``date``, ``datetime``, ``time``.
"""

from typing import Any

from chainval.predicates.predicate import Predicate


def is_inside(value: Any, start: Any, end: Any) -> bool:
    return start <= value <= end


def is_inside_strict(value: Any, start: Any, end: Any) -> bool:
    return start < value < end


def inside(start: Any, end: Any) -> Predicate:
    """True when ``start <= value <= end``."""
    return Predicate(lambda value: is_inside(value, start, end))


def inside_strict(start: Any, end: Any) -> Predicate:
    """True when ``start < value < end``."""
    return Predicate(lambda value: is_inside_strict(value, start, end))
