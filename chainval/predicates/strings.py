"""String predicates.

Factories return a ``Predicate``; plain shape checks (``is_blank``,
``is_email``, ...) are ordinary functions and can be passed to a validator
directly or wrapped with ``predicates.of`` for ``&`` / ``|`` / ``~``.
"""

import re
import unicodedata
from collections.abc import Callable
from enum import Enum

from chainval.predicates import comparisons
from chainval.predicates.predicate import Predicate

PATTERN_EMAIL = re.compile(
    r"^[\w\-+]+(\.\w+)*@[\w\-]+(\.\w+)*(\.[a-zA-Z]{2,})$"
)
PATTERN_IPV4_ADDRESS = re.compile(
    r"^((25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9])\."
    r"(25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9]|0)\."
    r"(25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[1-9]|0)\."
    r"(25[0-5]|2[0-4][0-9]|[0-1][0-9]{2}|[1-9][0-9]|[0-9]))$"
)


def in_enum(enumeration: type[Enum]) -> Predicate:
    """True when the value is the name of a member of ``enumeration``."""
    if enumeration is None:
        raise TypeError("Enumeration type must be provided")
    return Predicate(lambda value: value in enumeration.__members__)


def contains(part: str) -> Predicate:
    return Predicate(lambda value: part in value)


def contains_ignore_case(part: str) -> Predicate:
    return Predicate(lambda value: part.casefold() in value.casefold())


def contains_all(*parts: str) -> Predicate:
    return Predicate(lambda value: all(part in value for part in parts))


def contains_all_ignore_case(*parts: str) -> Predicate:
    folded = [part.casefold() for part in parts]
    return Predicate(lambda value: all(part in value.casefold() for part in folded))


def contains_any(*parts: str) -> Predicate:
    return Predicate(lambda value: any(part in value for part in parts))


def contains_any_ignore_case(*parts: str) -> Predicate:
    folded = [part.casefold() for part in parts]
    return Predicate(lambda value: any(part in value.casefold() for part in folded))


def contains_none(*parts: str) -> Predicate:
    return Predicate(lambda value: not any(part in value for part in parts))


def contains_none_ignore_case(*parts: str) -> Predicate:
    folded = [part.casefold() for part in parts]
    return Predicate(lambda value: not any(part in value.casefold() for part in folded))


def contains_one(*parts: str) -> Predicate:
    """True when exactly one of ``parts`` occurs in the value."""
    return Predicate(lambda value: sum(1 for part in parts if part in value) == 1)


def contains_one_ignore_case(*parts: str) -> Predicate:
    folded = [part.casefold() for part in parts]
    return Predicate(
        lambda value: sum(1 for part in folded if part in value.casefold()) == 1
    )


def starts_with(prefix: str) -> Predicate:
    return Predicate(lambda value: value.startswith(prefix))


def starts_with_ignore_case(prefix: str) -> Predicate:
    return Predicate(lambda value: value.casefold().startswith(prefix.casefold()))


def ends_with(suffix: str) -> Predicate:
    return Predicate(lambda value: value.endswith(suffix))


def ends_with_ignore_case(suffix: str) -> Predicate:
    return Predicate(lambda value: value.casefold().endswith(suffix.casefold()))


def is_upper(value: str) -> bool:
    return value == value.upper()


def is_lower(value: str) -> bool:
    return value == value.lower()


def is_length_of(predicate: Callable[[int], bool]) -> Predicate:
    """Apply ``predicate`` to the length of the value."""
    if predicate is None:
        raise TypeError("Predicate must be provided")
    return Predicate(lambda value: predicate(len(value)))


def is_length_eq(measure: int) -> Predicate:
    return is_length_of(comparisons.eq(measure))


def is_length_lt(measure: int) -> Predicate:
    return is_length_of(comparisons.lt(measure))


def is_length_le(measure: int) -> Predicate:
    return is_length_of(comparisons.le(measure))


def is_length_gt(measure: int) -> Predicate:
    return is_length_of(comparisons.gt(measure))


def is_length_ge(measure: int) -> Predicate:
    return is_length_of(comparisons.ge(measure))


def min_length(measure: int) -> Predicate:
    """True when the value is shorter than ``measure``."""
    return is_length_lt(measure)


def max_length(measure: int) -> Predicate:
    """True when the value is longer than ``measure``."""
    return is_length_gt(measure)


def matches(pattern: str | re.Pattern) -> Predicate:
    """True when the whole value matches ``pattern``."""
    if pattern is None:
        raise TypeError("Pattern must be provided")
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Predicate(lambda value: compiled.fullmatch(value) is not None)


def is_email(value: str) -> bool:
    return PATTERN_EMAIL.fullmatch(value) is not None


def is_ipv4(value: str) -> bool:
    return PATTERN_IPV4_ADDRESS.fullmatch(value) is not None


def is_blank(value: str | None) -> bool:
    """True for None, the empty string and whitespace-only strings."""
    return value is None or not value.strip()


def not_blank(value: str | None) -> bool:
    return not is_blank(value)


def is_alphanumeric(value: str) -> bool:
    return all(char.isalnum() for char in value)


def is_numeric(value: str) -> bool:
    return all(char.isdigit() for char in value)


def is_unicode(value: str) -> bool:
    """True when every character is an assigned code point."""
    return all(unicodedata.category(char) != "Cn" for char in value)


def is_alphabetic(value: str) -> bool:
    return all(char.isalpha() for char in value)
