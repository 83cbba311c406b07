"""Validator protocol and guarded invocation."""

from typing import Any, Protocol, runtime_checkable

from easyconfig.errors import PropertyValidationError, ValidatorEvalError


@runtime_checkable
class Validator(Protocol):
    """Protocol for property validators.

    Any callable taking the candidate value and returning a truthy result
    for accepted values can be attached to a configuration entry.
    """

    def __call__(self, candidate: Any) -> object:
        """Check a candidate value.

        Args:
            candidate: The value about to be stored.

        Returns:
            Truthy if the value is acceptable.
        """
        ...


def accept_all(candidate: Any) -> bool:
    """Validator that accepts every value."""
    return True


def run_validator(
    property_name: str, validator: Validator | None, candidate: Any
) -> None:
    """Run a property validator against a candidate value.

    Args:
        property_name: Property the value is meant for.
        validator: Validator to run, or None to accept everything.
        candidate: Value to check.

    Raises:
        ValidatorEvalError: If the validator raises, or its result cannot
            be tested for truth.
        PropertyValidationError: If the validator returns a falsy result.
    """
    if validator is None:
        return
    try:
        accepted = bool(validator(candidate))
    except Exception as e:
        raise ValidatorEvalError(
            property_name, candidate, f"{type(e).__name__}: {e}"
        ) from e
    if not accepted:
        raise PropertyValidationError(property_name, candidate)
