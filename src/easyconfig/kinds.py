"""Value kind classification."""

import numbers
from enum import Enum


class ValueKind(str, Enum):
    """Coarse runtime classification of a configuration value."""

    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    FUNCTION = "function"
    OBJECT = "object"
    SYMBOL = "symbol"


def kind_of(value: object) -> ValueKind:
    """Classify a value into exactly one kind.

    Used both when inferring an entry's kinds at setup and when checking
    a written value, so the two always agree.

    Args:
        value: Any Python value.

    Returns:
        The kind of the value.
    """
    if value is None:
        return ValueKind.UNDEFINED
    # Enum members first, including IntEnum and str-mixin members
    if isinstance(value, Enum):
        return ValueKind.SYMBOL
    # bool is a numbers.Number subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.OBJECT


def parse_kind(tag: object) -> ValueKind:
    """Parse a kind tag given as a ValueKind or its string value.

    Args:
        tag: Kind tag to parse.

    Returns:
        The matching kind.

    Raises:
        ValueError: If the tag is not a known kind.
    """
    if isinstance(tag, ValueKind):
        return tag
    if not isinstance(tag, str):
        raise ValueError(f"kind tag must be a string, got {type(tag).__name__}")
    try:
        return ValueKind(tag)
    except ValueError:
        allowed = ", ".join(kind.value for kind in ValueKind)
        raise ValueError(f"unknown kind '{tag}' (allowed: {allowed})") from None


def format_kinds(kinds: tuple[ValueKind, ...]) -> str:
    """Join kinds in declaration order for messages, e.g. ``string|boolean``."""
    return "|".join(kind.value for kind in kinds)
