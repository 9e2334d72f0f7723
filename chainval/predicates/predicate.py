"""Composable boolean predicates.

A ``Predicate`` wraps a one-argument boolean test so that tests can be
combined with ``&``, ``|`` and ``~`` the same way plain conditions are.
Validators consume predicates under the "true means fail" convention, so
``Predicate`` itself carries no failure semantics.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Predicate(Generic[T]):
    """Callable boolean test supporting ``&``, ``|`` and ``~``."""

    __slots__ = ("_test",)

    def __init__(self, test: Callable[[T], Any]):
        if test is None:
            raise TypeError("Predicate must be provided")
        if not callable(test):
            raise TypeError(f"Predicate must be callable, got {type(test).__name__}")
        self._test = test

    def __call__(self, value: T) -> bool:
        return bool(self._test(value))

    def test(self, value: T) -> bool:
        return self(value)

    def __and__(self, other: Callable[[T], Any]) -> "Predicate[T]":
        other = of(other)
        return Predicate(lambda value: self(value) and other(value))

    def __or__(self, other: Callable[[T], Any]) -> "Predicate[T]":
        other = of(other)
        return Predicate(lambda value: self(value) or other(value))

    def __invert__(self) -> "Predicate[T]":
        return Predicate(lambda value: not self(value))

    def __repr__(self) -> str:
        return f"Predicate({self._test!r})"


def of(test: Callable[[T], Any]) -> Predicate[T]:
    """Wrap a plain callable as a composable Predicate.

    A Predicate is returned unchanged.

    Raises:
        TypeError: If test is None or not callable
    """
    if isinstance(test, Predicate):
        return test
    return Predicate(test)
