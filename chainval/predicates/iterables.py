"""Predicates over iterables.

Each predicate walks the iterable once per call, so one-shot iterators are
consumed by the test.
"""

from collections.abc import Callable, Iterable
from typing import Any

from chainval.predicates import comparisons
from chainval.predicates.predicate import Predicate


def size_of(size: int) -> Predicate:
    return Predicate(lambda values: sum(1 for _ in values) == size)


def not_empty(values: Iterable) -> bool:
    return any(True for _ in values)


def is_empty(values: Iterable) -> bool:
    return not not_empty(values)


def all_of(predicate: Callable[[Any], bool]) -> Predicate:
    """True when every element satisfies ``predicate``."""
    return Predicate(lambda values: all(predicate(value) for value in values))


def any_of(predicate: Callable[[Any], bool]) -> Predicate:
    return Predicate(lambda values: any(predicate(value) for value in values))


def none_of(predicate: Callable[[Any], bool]) -> Predicate:
    return Predicate(lambda values: not any(predicate(value) for value in values))


def count_of(
    predicate: Callable[[Any], bool], count: int | Callable[[int], bool]
) -> Predicate:
    """Test how many elements satisfy ``predicate``.

    Args:
        predicate: Element test
        count: Exact expected count, or a test applied to the count
    """
    if predicate is None:
        raise TypeError("Element predicate must be provided")
    if count is None:
        raise TypeError("Count predicate must be provided")
    count_test = count if callable(count) else comparisons.eq(count)
    return Predicate(
        lambda values: count_test(sum(1 for value in values if predicate(value)))
    )


def one_of(predicate: Callable[[Any], bool]) -> Predicate:
    return count_of(predicate, 1)


def is_unique(element: Any) -> Predicate:
    """True when ``element`` occurs exactly once."""
    return one_of(lambda value: value == element)


def all_unique(values: Iterable) -> bool:
    """True when no element repeats. Elements must be hashable."""
    items = list(values)
    return len(items) == len(set(items))


def overlaps(another: Iterable) -> Predicate:
    """True when the value shares at least one element with ``another``."""
    others = list(another)
    return Predicate(lambda values: any(value in others for value in values))
