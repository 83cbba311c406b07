"""Error types for the configuration store."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of configuration errors.

    - REFERENCE: Property name is not in the store
    - TYPE: Value kind is not accepted by the property
    - VALIDATION: Value rejected by the property validator
    - EVAL: Property validator raised while checking a value
    - SETUP: Malformed entry or options at construction time
    """

    REFERENCE = "REFERENCE"
    TYPE = "TYPE"
    VALIDATION = "VALIDATION"
    EVAL = "EVAL"
    SETUP = "SETUP"


class ConfigurationError(Exception):
    """Base exception for configuration store errors.

    Provides structured error information for callers and diagnostics.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        property_name: str | None = None,
        details: dict[str, str | None] | None = None,
    ) -> None:
        """Initialize the configuration error.

        Args:
            kind: Classification of the error.
            message: Human-readable error message.
            property_name: Name of the offending property.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.property_name = property_name
        self.details = details or {}

    def to_dict(self) -> dict[str, str | None | dict[str, str | None]]:
        """Convert error to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "property_name": self.property_name,
            "details": self.details,
        }


class UnknownPropertyError(ConfigurationError, LookupError):
    """Raised when a read or write targets a property the store does not hold."""

    def __init__(self, property_name: str) -> None:
        """Initialize the error with the missing property name.

        Args:
            property_name: The property that was not found.
        """
        super().__init__(
            kind=ErrorKind.REFERENCE,
            message=f"Configuration property '{property_name}' does not exist.",
            property_name=property_name,
        )


class PropertyTypeError(ConfigurationError, TypeError):
    """Raised when a value's kind is not among the property's accepted kinds."""

    def __init__(self, property_name: str, expected: str, actual: str) -> None:
        """Initialize the type error.

        Args:
            property_name: The property being written.
            expected: Accepted kinds, pipe-separated in declaration order.
            actual: Kind of the rejected value.
        """
        super().__init__(
            kind=ErrorKind.TYPE,
            message=(
                f"Invalid type for configuration property '{property_name}', "
                f"expected '{expected}'."
            ),
            property_name=property_name,
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class PropertyValidationError(ConfigurationError, ValueError):
    """Raised when a property validator rejects a value."""

    def __init__(self, property_name: str, value: object) -> None:
        """Initialize the validation error.

        Args:
            property_name: The property being written.
            value: The rejected value.
        """
        super().__init__(
            kind=ErrorKind.VALIDATION,
            message=(
                f"Invalid value {value!r} for configuration property "
                f"'{property_name}'."
            ),
            property_name=property_name,
            details={"value": repr(value)},
        )
        self.value = value


class ValidatorEvalError(ConfigurationError, RuntimeError):
    """Raised when a property validator itself fails while checking a value.

    The exception raised by the validator is chained as ``__cause__``.
    """

    def __init__(self, property_name: str, value: object, reason: str) -> None:
        """Initialize the evaluation error.

        Args:
            property_name: The property being written.
            value: The value handed to the validator.
            reason: Description of the validator failure.
        """
        super().__init__(
            kind=ErrorKind.EVAL,
            message=(
                f"Validator for configuration property '{property_name}' "
                f"failed on value {value!r}: {reason}"
            ),
            property_name=property_name,
            details={"value": repr(value), "reason": reason},
        )
        self.value = value


class SetupError(ConfigurationError, ValueError):
    """Raised when a configuration entry or store option is malformed."""

    def __init__(
        self, property_name: str | None = None, reason: str | None = None
    ) -> None:
        """Initialize the setup error.

        Args:
            property_name: The property whose entry is malformed.
            reason: Why the entry was rejected.
        """
        message = "Invalid configuration entry"
        if property_name:
            message += f": invalid value for '{property_name}'"
            if reason:
                message += f", {reason.rstrip('.')}"
        elif reason:
            message += f": {reason.rstrip('.')}"
        super().__init__(
            kind=ErrorKind.SETUP,
            message=f"{message}.",
            property_name=property_name,
            details={"reason": reason} if reason else None,
        )
        self.reason = reason
