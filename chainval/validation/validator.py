"""Composable validator chains.

A ``Validator`` wraps a one-argument callable that raises ``ValidationError``
when it rejects a value. Validators never change: every combinator returns a
new validator that runs the receiver first and the new step after it,
stopping at the first failure. ``validate`` always hands back the value it
was given, so mapped steps inspect a derived value without replacing it.

Typical usage::

    person_validator = (
        Validator.not_null("Person must be provided")
        .then_map(lambda p: p.name, strings.is_blank, "Name must not be blank")
        .then_map(lambda p: p.age, numbers.is_negative, "Age must be non-negative")
    )

    person_validator.validate(person)         # returns person or raises
    error = person_validator.collect(person)  # ValidationError or None

Predicates follow the "true means fail" convention throughout:
``Validator.of_predicate(p, message)`` rejects a value exactly when ``p``
returns a truthy result for it.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from chainval.config import get_settings
from chainval.exceptions import ValidationError
from chainval.predicates.predicate import Predicate
from chainval.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Message = str | Callable[..., str]


def _require_callable(fn: Any, error: str) -> Callable:
    if fn is None:
        raise TypeError(error)
    if not callable(fn):
        raise TypeError(f"{error}; got non-callable {type(fn).__name__}")
    return fn


def _message_renderer(message: Message | None) -> Callable[..., str]:
    """Turn a fixed string or a message function into a message function."""
    if message is None:
        raise TypeError("Error message must be provided")
    if isinstance(message, str):
        return lambda *args: message
    if callable(message):
        return message
    raise TypeError(
        f"Error message must be a string or a callable, got {type(message).__name__}"
    )


def _always(value: Any) -> bool:
    return True


def _not_none(value: Any) -> bool:
    return value is not None


def _step(next_step: Any, message: Message | None = None) -> "Validator":
    """Resolve the ``(next, message)`` argument pair used by the combinators.

    Without a message ``next_step`` must be a Validator; with one it is a
    predicate that ``message`` explains. Plain validation callables go
    through ``Validator.of`` first.

    Raises:
        TypeError: If a non-Validator is given without a message, or a
            Validator is given with one
    """
    if message is None:
        if next_step is None:
            raise TypeError("Validator must be provided")
        if not isinstance(next_step, Validator):
            raise TypeError(
                "Error message must be provided for a predicate step; "
                "wrap validation callables with Validator.of"
            )
        return next_step
    if isinstance(next_step, Validator):
        raise TypeError("A Validator step takes no error message")
    return Validator.of_predicate(next_step, message)


class Validator(Generic[T]):
    """An immutable, composable validation step.

    Args:
        fn: Callable taking the value under validation. It signals rejection
            by raising ValidationError; its return value is ignored.

    Raises:
        TypeError: If fn is None or not callable
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[T], Any]):
        self._fn = _require_callable(fn, "Validator must be provided")

    # ── Construction ──

    @classmethod
    def of(cls, fn: "Callable[[T], Any] | Validator[T]") -> "Validator[T]":
        """Wrap a validation callable; a Validator is returned unchanged."""
        if isinstance(fn, Validator):
            return fn
        return cls(fn)

    @classmethod
    def empty(cls) -> "Validator[T]":
        """Identity validator: accepts every value, None included."""
        return cls(_always)

    @classmethod
    def build(
        cls, builder: "Callable[[Validator[T]], Validator[T]]"
    ) -> "Validator[T]":
        """Build a chain starting from ``Validator.empty()``.

        Args:
            builder: Receives the identity validator and returns the composed chain

        Raises:
            TypeError: If builder is missing or does not return a Validator
        """
        _require_callable(builder, "Validator builder function must be provided")
        built = builder(cls.empty())
        if not isinstance(built, Validator):
            raise TypeError("Validator builder function must return a Validator")
        return built

    @classmethod
    def of_predicate(
        cls, predicate: Callable[[T], Any], message: Message
    ) -> "Validator[T]":
        """Create a validator that fails when ``predicate(value)`` is true.

        Args:
            predicate: Failure condition
            message: Fixed message, or a function of the rejected value

        Raises:
            TypeError: If predicate or message is missing
        """
        _require_callable(predicate, "Predicate must be provided")
        render = _message_renderer(message)

        def check(value):
            if predicate(value):
                raise ValidationError(render(value))

        return cls(check)

    @classmethod
    def not_null(cls, message: Message | None = None) -> "Validator[T]":
        """Create a validator rejecting None."""
        if message is None:
            message = get_settings().messages.not_null_message
        return cls.of_predicate(lambda value: value is None, message)

    @classmethod
    def is_null(cls, message: Message | None = None) -> "Validator[T]":
        """Create a validator rejecting anything but None."""
        if message is None:
            message = get_settings().messages.is_null_message
        return cls.of_predicate(_not_none, message)

    # ── Invocation ──

    def validate(self, value: T) -> T:
        """Validate ``value``.

        Returns:
            The same value object, for fluent use by the caller

        Raises:
            ValidationError: At the first failing step of the chain
        """
        self._fn(value)
        return value

    __call__ = validate

    def collect(self, value: T) -> ValidationError | None:
        """Validate ``value`` without raising.

        Returns:
            The raised ValidationError on failure, None on success
        """
        try:
            self._fn(value)
        except ValidationError as error:
            logger.debug("Validation failed", reason=error.message)
            return error
        return None

    def to_predicate(self) -> Predicate[T]:
        """Adapt this validator to a predicate that is true when validation fails."""
        current = self._fn

        def fails(value):
            try:
                current(value)
            except ValidationError:
                return True
            return False

        return Predicate(fails)

    # ── Sequencing ──

    def then_if(
        self,
        condition: Callable[[T], Any],
        next_step: "Validator[T] | Callable[[T], Any]",
        message: Message | None = None,
    ) -> "Validator[T]":
        """Chain ``next_step``, run only when ``condition(value)`` holds.

        The condition is evaluated after this validator has accepted the value.

        Args:
            condition: Gate for the next step
            next_step: Validator, or a failure predicate when message is given
            message: Failure message for a predicate next_step

        Raises:
            TypeError: If any required argument is missing
        """
        _require_callable(condition, "Condition predicate must be provided")
        step = _step(next_step, message)
        current = self._fn

        def validate_then(value):
            current(value)
            if condition(value):
                step.validate(value)

        return Validator(validate_then)

    def then(
        self,
        next_step: "Validator[T] | Callable[[T], Any]",
        message: Message | None = None,
    ) -> "Validator[T]":
        """Chain ``next_step`` to always run after this validator succeeds."""
        return self.then_if(_always, next_step, message)

    def then_if_not_null(
        self,
        next_step: "Validator[T] | Callable[[T], Any]",
        message: Message | None = None,
    ) -> "Validator[T]":
        """Chain ``next_step`` to run only for values that are not None."""
        return self.then_if(_not_none, next_step, message)

    # ── Mapping ──

    def then_map_if(
        self,
        condition: Callable[[T], Any],
        mapper: Callable[[T], R],
        next_step: "Validator[R] | Callable[..., Any]",
        message: Message | None = None,
        *,
        with_original: bool = False,
    ) -> "Validator[T]":
        """Validate ``mapper(value)`` when ``condition(value)`` holds.

        The mapped value is only inspected; the chain still returns the
        original value.

        Args:
            condition: Gate for the mapped step
            mapper: Derives the value to validate
            next_step: Validator for the mapped value, or a failure predicate
            message: Failure message for a predicate next_step
            with_original: Pass ``(mapped, original)`` to the predicate and to
                a callable message instead of ``mapped`` alone
        """
        _require_callable(condition, "Condition predicate must be provided")
        return self.then_if(
            condition,
            map_value(mapper, next_step, message, with_original=with_original),
        )

    def then_map(
        self,
        mapper: Callable[[T], R],
        next_step: "Validator[R] | Callable[..., Any]",
        message: Message | None = None,
        *,
        with_original: bool = False,
    ) -> "Validator[T]":
        """Always validate ``mapper(value)`` after this validator succeeds."""
        return self.then_map_if(
            _always, mapper, next_step, message, with_original=with_original
        )

    def then_map_if_not_null(
        self,
        mapper: Callable[[T], R],
        next_step: "Validator[R] | Callable[..., Any]",
        message: Message | None = None,
        *,
        with_original: bool = False,
    ) -> "Validator[T]":
        """Validate ``mapper(value)`` only when the value is not None."""
        return self.then_map_if(
            _not_none, mapper, next_step, message, with_original=with_original
        )

    def __repr__(self) -> str:
        return f"Validator({self._fn!r})"


def map_value(
    mapper: Callable[[T], R],
    next_step: "Validator[R] | Callable[..., Any]",
    message: Message | None = None,
    *,
    with_original: bool = False,
) -> Validator[T]:
    """Lift a validator of a derived value to one over the original value.

    Every ``then_map*`` combinator is built from this function.

    Args:
        mapper: Derives the value to validate; applied on every call
        next_step: Validator for the mapped value, or a failure predicate
        message: Failure message for a predicate next_step
        with_original: Pass ``(mapped, original)`` to the predicate and to a
            callable message

    Raises:
        TypeError: If any required argument is missing, or with_original is
            set without a predicate and message
    """
    _require_callable(mapper, "Value mapping function must be provided")

    if with_original:
        predicate = _require_callable(next_step, "Predicate must be provided")
        if message is None:
            raise TypeError("Error message must be provided when with_original is set")
        render = _message_renderer(message)

        def validate_mapped(value):
            mapped = mapper(value)
            if predicate(mapped, value):
                raise ValidationError(render(mapped, value))

        return Validator(validate_mapped)

    if message is None and next_step is None:
        raise TypeError("Mapped value validator must be provided")
    step = _step(next_step, message)

    def validate_mapped(value):
        step.validate(mapper(value))

    return Validator(validate_mapped)
