"""Combinators lifting element validators over collections and mappings.

Each function returns a new ``Validator`` over the container that hands the
container back unchanged on success. Iteration follows the container's own
order and stops at the first failing element.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeVar

from chainval.exceptions import ValidationError
from chainval.validation.validator import (
    Message,
    Validator,
    _message_renderer,
    _require_callable,
    _step,
    map_value,
)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def not_null(message: Message | None = None) -> Validator:
    """Validator rejecting None; see ``Validator.not_null``."""
    return Validator.not_null(message)


def is_null(message: Message | None = None) -> Validator:
    """Validator rejecting anything but None; see ``Validator.is_null``."""
    return Validator.is_null(message)


def each_of(
    next_step: "Validator[T] | Callable[..., Any]",
    message: Message | None = None,
    *,
    with_collection: bool = False,
) -> Validator[Iterable[T]]:
    """Apply an element validator to every element of a collection.

    Args:
        next_step: Element Validator, or a failure predicate when message is given
        message: Failure message for a predicate next_step
        with_collection: Pass ``(element, collection)`` to the predicate and to
            a callable message, for checks relative to the whole collection.
            The collection must be re-iterable; one-shot iterators are refused

    Returns:
        Validator over the collection; the first failing element aborts it

    Raises:
        TypeError: If any required argument is missing, or with_collection
            is set and the validated value is a one-shot iterator
    """
    if not with_collection:
        element_validator = _step(next_step, message)

        def validate_each(values):
            for value in values:
                element_validator.validate(value)

        return Validator(validate_each)

    predicate = _require_callable(next_step, "Predicate must be provided")
    render = _message_renderer(message)

    def validate_each_relative(values):
        if isinstance(values, Iterator):
            raise TypeError(
                "each_of with_collection needs a re-iterable collection, "
                f"got iterator {type(values).__name__}"
            )
        for value in values:
            if predicate(value, values):
                raise ValidationError(render(value, values))

    return Validator(validate_each_relative)


def if_not_null_and(
    condition: Callable[[T], Any],
    next_step: "Validator[T] | Callable[[T], Any]",
    message: Message | None = None,
) -> Validator[T]:
    """Run a validator only for non-None values satisfying ``condition``.

    None and a false condition both count as success.
    """
    _require_callable(condition, "Condition predicate must be provided")
    validator = _step(next_step, message)

    def validate_guarded(value):
        if value is not None and condition(value):
            validator.validate(value)

    return Validator(validate_guarded)


def if_present(
    next_step: "Validator[T] | Callable[[T], Any]",
    message: Message | None = None,
) -> Validator[T | None]:
    """Validate an optional value only when it is present.

    Absence (None) is accepted; checking that a value is present is the job
    of an upstream ``not_null``.
    """
    validator = _step(next_step, message)

    def validate_present(value):
        if value is not None:
            validator.validate(value)

    return Validator(validate_present)


def key_value_of(
    key: K,
    next_step: "Validator[V] | Callable[[V], Any]",
    message: Message | None = None,
) -> Validator[Mapping[K, V]]:
    """Validate the value stored under ``key``; a missing key yields None."""
    if key is None:
        raise TypeError("Key must be provided")
    return map_value(lambda mapping: mapping.get(key), next_step, message)


def if_key_value_is_not_null(
    key: K,
    next_step: "Validator[V] | Callable[[V], Any]",
    message: Message | None = None,
) -> Validator[Mapping[K, V]]:
    """Validate the value under ``key`` only when it is present and not None."""
    if key is None:
        raise TypeError("Key must be provided")
    return map_value(lambda mapping: mapping.get(key), if_present(next_step, message))


def each_entry_of(
    next_step: "Validator[tuple[K, V]] | Callable[[tuple[K, V]], Any]",
    message: Message | None = None,
) -> Validator[Mapping[K, V]]:
    """Validate every ``(key, value)`` pair of a mapping in iteration order."""
    return map_value(lambda mapping: mapping.items(), each_of(next_step, message))


__all__ = [
    "each_entry_of",
    "each_of",
    "if_key_value_is_not_null",
    "if_not_null_and",
    "if_present",
    "is_null",
    "key_value_of",
    "map_value",
    "not_null",
]
