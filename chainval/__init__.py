"""chainval: composable, fail-fast validation chains.

Example::

    from chainval import Validator, ValidationError
    from chainval.predicates import numbers

    validator = Validator.not_null("must not be null").then_map(
        lambda person: person.age, numbers.is_negative, "age must be non-negative"
    )
"""

from chainval.exceptions import ValidationError
from chainval.validation import (
    ValidationResult,
    ValidationService,
    Validator,
    each_entry_of,
    each_of,
    if_key_value_is_not_null,
    if_not_null_and,
    if_present,
    is_null,
    key_value_of,
    map_value,
    not_null,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationService",
    "Validator",
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
