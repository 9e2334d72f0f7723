"""Failure signal raised by validators.

``ValidationError`` is the only domain-level error in chainval. It carries a
single, non-blank, human-readable message and is used to abort a validation
chain at the first failing step.
"""


class ValidationError(Exception):
    """Raised when a validation step rejects a value.

    Args:
        message: Human-readable explanation; must not be empty or blank.

    Raises:
        TypeError: If message is None or not a string
        ValueError: If message is empty or whitespace only
    """

    def __init__(self, message: str):
        if message is None:
            raise TypeError("Validation message must be provided")
        if not isinstance(message, str):
            raise TypeError(
                f"Validation message must be a string, got {type(message).__name__}"
            )
        if not message.strip():
            raise ValueError("Validation message must not be blank")
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"ValidationError({self._message!r})"
