"""Numeric predicates.

Sign checks go through ``Decimal`` so ints, floats, Decimals and numeric
strings are judged the same way. ``minimum`` and ``maximum`` are written
against the failure convention used by validators: they are true when the
value violates the bound.
"""

from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from chainval.predicates import comparisons
from chainval.predicates.predicate import Predicate


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"{value!r} is not a number")
    return Decimal(str(value))


def is_number(value: Any) -> bool:
    """Check whether ``value`` reads as a finite number."""
    if value is None:
        return False
    try:
        return _to_decimal(value).is_finite()
    except (InvalidOperation, ValueError, TypeError):
        return False


def is_zero(value: Any) -> bool:
    return _to_decimal(value).is_zero()


def is_positive(value: Any) -> bool:
    number = _to_decimal(value)
    return not number.is_zero() and not number.is_signed()


def is_negative(value: Any) -> bool:
    number = _to_decimal(value)
    return not number.is_zero() and number.is_signed()


def minimum(bound: Any) -> Predicate:
    """True when the value is below ``bound``."""
    return comparisons.lt(bound)


def maximum(bound: Any) -> Predicate:
    """True when the value is above ``bound``."""
    return comparisons.gt(bound)


def scale_of(value: Decimal) -> int:
    """Number of digits to the right of the decimal point (negative for E+n)."""
    return -_to_decimal(value).as_tuple().exponent


def precision_of(value: Decimal) -> int:
    """Number of significant digits in the unscaled value."""
    return len(_to_decimal(value).as_tuple().digits)


def _measured_at(measure: Callable[[Decimal], int], predicate: Predicate) -> Predicate:
    return Predicate(lambda value: predicate(measure(value)))


def is_scale_eq(measure: int) -> Predicate:
    return _measured_at(scale_of, comparisons.eq(measure))


def is_scale_lt(measure: int) -> Predicate:
    return _measured_at(scale_of, comparisons.lt(measure))


def is_scale_le(measure: int) -> Predicate:
    return _measured_at(scale_of, comparisons.le(measure))


def is_scale_gt(measure: int) -> Predicate:
    return _measured_at(scale_of, comparisons.gt(measure))


def is_scale_ge(measure: int) -> Predicate:
    return _measured_at(scale_of, comparisons.ge(measure))


def is_precision_eq(measure: int) -> Predicate:
    return _measured_at(precision_of, comparisons.eq(measure))


def is_precision_lt(measure: int) -> Predicate:
    return _measured_at(precision_of, comparisons.lt(measure))


def is_precision_le(measure: int) -> Predicate:
    return _measured_at(precision_of, comparisons.le(measure))


def is_precision_gt(measure: int) -> Predicate:
    return _measured_at(precision_of, comparisons.gt(measure))


def is_precision_ge(measure: int) -> Predicate:
    return _measured_at(precision_of, comparisons.ge(measure))
