"""Validation service for running several validators over one value.

A single validator chain stops at its first failure. This service is the
caller-side aggregation built from repeated ``collect`` calls: each named
validator runs independently and every failure is reported.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from chainval.exceptions import ValidationError
from chainval.utils.logging import get_logger
from chainval.validation.results import ValidationResult
from chainval.validation.validator import Validator

logger = get_logger(__name__)


class ValidationService:
    """Orchestrates multiple named validators and aggregates results."""

    def __init__(self, validators: Mapping[str, Validator]):
        """Initialize service with named validators.

        Args:
            validators: Mapping of validator name to Validator

        Raises:
            TypeError: If validators is missing or holds a non-Validator
        """
        if validators is None:
            raise TypeError("Validators must be provided")
        for name, validator in validators.items():
            if not isinstance(validator, Validator):
                raise TypeError(f"Validator '{name}' must be a Validator instance")
        self.validators = dict(validators)

    def validate_all(self, value: Any) -> dict[str, ValidationResult]:
        """Run all validators against ``value`` and return results.

        Returns:
            Dictionary mapping validator name to ValidationResult
        """
        results = {
            name: ValidationResult.from_error(name, validator.collect(value))
            for name, validator in self.validators.items()
        }
        failed = [name for name, result in results.items() if result.failed]
        logger.debug(
            "Validated value", validators=len(results), failed=len(failed)
        )
        return results

    def validate_each(
        self, validator: Validator, values: Iterable[Any], name: str = "element"
    ) -> list[ValidationResult]:
        """Collect one result per element instead of stopping at the first failure.

        Args:
            validator: Element validator
            values: Elements to validate, in iteration order
            name: Prefix for result names; results are named ``name[index]``

        Returns:
            List of ValidationResult in element order
        """
        if not isinstance(validator, Validator):
            raise TypeError("Validator must be provided")
        return [
            ValidationResult.from_error(f"{name}[{index}]", validator.collect(value))
            for index, value in enumerate(values)
        ]

    def has_errors(
        self, results: Mapping[str, ValidationResult] | Iterable[ValidationResult]
    ) -> bool:
        """Check if any validation failed."""
        return any(r.failed for r in _values(results))

    def errors(
        self, results: Mapping[str, ValidationResult] | Iterable[ValidationResult]
    ) -> list[str]:
        """Failure messages in result order."""
        return [r.message for r in _values(results) if r.failed]

    def format_error_report(
        self, results: Mapping[str, ValidationResult] | Iterable[ValidationResult]
    ) -> str:
        """Format all failures, one per line.

        Returns:
            Formatted error report string, empty when nothing failed
        """
        failed = [r for r in _values(results) if r.failed]

        if not failed:
            return ""

        return "\n".join(r.format_error() for r in failed)

    def raise_for_errors(
        self, results: Mapping[str, ValidationResult] | Iterable[ValidationResult]
    ) -> None:
        """Raise ValidationError for the first failed result, if any."""
        for result in _values(results):
            if result.failed:
                logger.info(
                    "Validation failed",
                    validator=result.validator_name,
                    reason=result.message,
                )
                raise ValidationError(result.message)


def _values(
    results: Mapping[str, ValidationResult] | Iterable[ValidationResult],
) -> Iterable[ValidationResult]:
    if isinstance(results, Mapping):
        return results.values()
    return results
