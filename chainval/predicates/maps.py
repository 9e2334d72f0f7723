"""Predicates over mappings."""

from collections.abc import Callable, Mapping
from typing import Any

from chainval.predicates.predicate import Predicate


def contains_key(key: Any) -> Predicate:
    return Predicate(lambda mapping: key in mapping)


def contains_value(value: Any) -> Predicate:
    return Predicate(lambda mapping: value in mapping.values())


def is_empty(mapping: Mapping) -> bool:
    return len(mapping) == 0


def size_of(size: int) -> Predicate:
    return Predicate(lambda mapping: len(mapping) == size)


def key_value(key: Any, predicate: Callable[[Any], bool]) -> Predicate:
    """Apply ``predicate`` to the value under ``key`` (None when missing)."""
    if predicate is None:
        raise TypeError("Predicate must be provided")
    return Predicate(lambda mapping: predicate(mapping.get(key)))


def key_value_equals(key: Any, measure: Any) -> Predicate:
    return Predicate(lambda mapping: mapping.get(key) == measure)
