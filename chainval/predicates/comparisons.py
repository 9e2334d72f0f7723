"""Comparison and membership predicates.

Every factory compares the tested value against a fixed measure using the
natural ordering of the values involved.
"""

from collections.abc import Iterable
from typing import Any

from chainval.predicates.predicate import Predicate


def gt(measure: Any) -> Predicate:
    return Predicate(lambda value: value > measure)


def lt(measure: Any) -> Predicate:
    return Predicate(lambda value: value < measure)


def eq(measure: Any) -> Predicate:
    return Predicate(lambda value: value == measure)


def ge(measure: Any) -> Predicate:
    return Predicate(lambda value: value >= measure)


def le(measure: Any) -> Predicate:
    return Predicate(lambda value: value <= measure)


def _members(values: tuple) -> list:
    # A single non-string iterable argument is the filter itself.
    if len(values) == 1 and isinstance(values[0], Iterable) and not isinstance(
        values[0], (str, bytes)
    ):
        return list(values[0])
    return list(values)


def is_in(*values: Any) -> Predicate:
    """True when the tested value equals one of ``values``.

    Accepts either the members as positional arguments or a single iterable
    (a list, set, generator, ...). The iterable is materialised once, at
    construction time.
    """
    members = _members(values)
    return Predicate(lambda value: value in members)


def not_in(*values: Any) -> Predicate:
    """True when the tested value equals none of ``values``."""
    members = _members(values)
    return Predicate(lambda value: value not in members)
