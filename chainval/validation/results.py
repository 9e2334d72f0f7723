"""Validation result types.

This module defines a structured result type for collected validation
outcomes, so callers can aggregate failures instead of stopping at the first.
"""

from dataclasses import dataclass

from chainval.exceptions import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of one collected validation run."""

    success: bool
    message: str
    validator_name: str

    @classmethod
    def from_error(
        cls, validator_name: str, error: ValidationError | None
    ) -> "ValidationResult":
        """Build a result from the outcome of ``Validator.collect``."""
        if error is None:
            return cls(True, "", validator_name)
        return cls(False, error.message, validator_name)

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.success

    def to_error(self) -> ValidationError | None:
        """Rebuild the failure signal; None for a successful result."""
        if self.success:
            return None
        return ValidationError(self.message)

    def format_error(self) -> str:
        """Format the failure as a report line.

        Returns empty string if validation succeeded.
        """
        if self.success:
            return ""
        return f"{self.validator_name}: {self.message}"
