"""Predicate helpers for common value shapes.

Predicates here answer a yes/no question about a value. Validators treat a
true answer as a failure, so pick the predicate that describes the *bad*
value::

    from chainval import Validator
    from chainval.predicates import numbers, strings

    name = Validator.not_null("name is required").then(
        strings.min_length(3), "name is too short"
    )
    age = Validator.of_predicate(numbers.is_negative, "age must be non-negative")
"""

from chainval.predicates import (
    comparisons,
    dates,
    iterables,
    maps,
    numbers,
    ranges,
    strings,
)
from chainval.predicates.comparisons import eq, ge, gt, is_in, le, lt, not_in
from chainval.predicates.predicate import Predicate, of

__all__ = [
    "Predicate",
    "of",
    "gt",
    "lt",
    "eq",
    "ge",
    "le",
    "is_in",
    "not_in",
    "comparisons",
    "dates",
    "iterables",
    "maps",
    "numbers",
    "ranges",
    "strings",
]
