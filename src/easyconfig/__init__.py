"""Typed, validated configuration properties for application objects."""

from easyconfig.configurable import Configurable, SupportsConfiguration
from easyconfig.errors import (
    ConfigurationError,
    ErrorKind,
    PropertyTypeError,
    PropertyValidationError,
    SetupError,
    UnknownPropertyError,
    ValidatorEvalError,
)
from easyconfig.kinds import ValueKind, kind_of
from easyconfig.models import ConfigurationEntry, EntryDescriptor, StoreOptions
from easyconfig.observability import StoreMetrics, configure_logging, get_logger
from easyconfig.store import ConfigurationStore
from easyconfig.validators import Validator


__all__ = [
    "Configurable",
    "ConfigurationEntry",
    "ConfigurationError",
    "ConfigurationStore",
    "EntryDescriptor",
    "ErrorKind",
    "PropertyTypeError",
    "PropertyValidationError",
    "SetupError",
    "StoreMetrics",
    "StoreOptions",
    "SupportsConfiguration",
    "UnknownPropertyError",
    "ValidatorEvalError",
    "Validator",
    "ValueKind",
    "configure_logging",
    "get_logger",
    "kind_of",
]
