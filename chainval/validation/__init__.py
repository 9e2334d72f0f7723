"""Validation chains.

``Validator`` is the composable unit; the functions in ``validators`` lift
element validators over collections and mappings; ``ValidationService``
aggregates several independent validators.
"""

from chainval.validation.results import ValidationResult
from chainval.validation.service import ValidationService
from chainval.validation.validator import Validator, map_value
from chainval.validation.validators import (
    each_entry_of,
    each_of,
    if_key_value_is_not_null,
    if_not_null_and,
    if_present,
    is_null,
    key_value_of,
    not_null,
)

__all__ = [
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
