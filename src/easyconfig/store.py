"""In-memory configuration store with typed, validated properties."""

from collections.abc import Iterator, Mapping
from typing import Any, overload

from pydantic import ValidationError

from easyconfig.errors import (
    ConfigurationError,
    PropertyTypeError,
    SetupError,
    UnknownPropertyError,
)
from easyconfig.kinds import kind_of
from easyconfig.models import (
    ConfigurationEntry,
    EntryDescriptor,
    StoreOptions,
)
from easyconfig.observability.logging import get_logger
from easyconfig.observability.metrics import StoreMetrics
from easyconfig.validators import run_validator


# Marks an omitted value argument; None is a legitimate value
MISSING: Any = object()


def _first_error(error: ValidationError) -> str:
    """Flatten the first pydantic error into a short reason."""
    first = error.errors()[0]
    message = str(first["msg"]).removeprefix("Value error, ")
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {message}" if location else message


def _parse_options(options: StoreOptions | Mapping[str, Any] | None) -> StoreOptions:
    if options is None:
        return StoreOptions()
    if isinstance(options, StoreOptions):
        return options
    if not isinstance(options, Mapping):
        raise SetupError(reason=f"options must be a mapping, got {type(options).__name__}")
    try:
        return StoreOptions.model_validate(dict(options))
    except ValidationError as e:
        raise SetupError("options", _first_error(e)) from e


def _is_descriptor(item: Any) -> bool:
    """A mapping is a descriptor when it holds 'value' and only descriptor keys."""
    return (
        isinstance(item, Mapping)
        and "value" in item
        and set(item) <= EntryDescriptor.FIELDS
    )


def _normalize_entry(name: str, item: Any) -> ConfigurationEntry:
    """Turn a raw value or an entry descriptor into a configuration entry.

    Args:
        name: Property name, used in error messages.
        item: Raw value, EntryDescriptor, or mapping of descriptor fields
            that includes ``value``.

    Returns:
        The normalized entry.

    Raises:
        SetupError: If the descriptor is malformed or its initial value
            is rejected by its validator.
    """
    if isinstance(item, EntryDescriptor):
        descriptor = item
    elif _is_descriptor(item):
        try:
            descriptor = EntryDescriptor.model_validate(dict(item))
        except ValidationError as e:
            raise SetupError(name, _first_error(e)) from e
    else:
        return ConfigurationEntry.infer(item)

    entry = descriptor.to_entry()
    try:
        run_validator(name, entry.validator, entry.value)
    except ConfigurationError as e:
        raise SetupError(name, f"initial value rejected: {e.message}") from e
    return entry


class ConfigurationStore:
    """Named configuration properties with kind checks and validators.

    The store is seeded once at construction. Entries are never removed;
    new ones appear only when unknown-property admission is enabled.
    Reads hand out copies, so the only way to change a value is
    ``set_config`` (or ``reset_config``).

    The store is not synchronized; callers sharing one across threads
    must serialize access.
    """

    def __init__(
        self,
        spec: Mapping[str, Any] | None = None,
        options: StoreOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Seed the store.

        Args:
            spec: Property name to raw value or entry descriptor.
            options: Behavior flags, as StoreOptions or a mapping of
                option names.

        Raises:
            SetupError: If an entry or the options are malformed.
        """
        self._options = _parse_options(options)
        self._entries: dict[str, ConfigurationEntry] = {}
        self._log = get_logger(__name__).bind(component="config_store")

        if spec is None:
            spec = {}
        if not isinstance(spec, Mapping):
            raise SetupError(reason=f"spec must be a mapping, got {type(spec).__name__}")

        for name, item in spec.items():
            if not isinstance(name, str):
                raise SetupError(repr(name), "property names must be strings")
            self._entries[name] = _normalize_entry(name, item)

        StoreMetrics.get_instance().record_seeded(len(self._entries))
        self._log.debug(
            "config_store_seeded",
            property_count=len(self._entries),
            add_properties_to_config_allowed=self._options.add_properties_to_config_allowed,
            allow_different_type_on_config=self._options.allow_different_type_on_config,
        )

    @classmethod
    def create(
        cls, spec: Mapping[str, Any] | None = None, **options: bool
    ) -> "ConfigurationStore":
        """Build a store for an object that holds it instead of inheriting.

        Args:
            spec: Property name to raw value or entry descriptor.
            **options: StoreOptions fields, snake_case or camelCase.

        Returns:
            A new store.
        """
        return cls(spec, options)

    @property
    def options(self) -> StoreOptions:
        """Behavior flags fixed at construction."""
        return self._options

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_config()!r})"

    def has_config(self, name: str) -> bool:
        """Check whether a property exists."""
        return name in self._entries

    def get_entry(self, name: str) -> ConfigurationEntry:
        """Get the stored entry of a property.

        Args:
            name: Property name.

        Returns:
            The immutable entry record.

        Raises:
            UnknownPropertyError: If the property does not exist.
        """
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownPropertyError(name)
        return entry

    def get_default(self, name: str) -> Any:
        """Get the default value of a property.

        Raises:
            UnknownPropertyError: If the property does not exist.
        """
        return self.get_entry(name).default

    @overload
    def get_config(self) -> dict[str, Any]: ...

    @overload
    def get_config(self, name: str) -> Any: ...

    def get_config(self, name: str | None = None) -> Any:
        """Read one property value, or a snapshot of all of them.

        Args:
            name: Property name; omit to get every property.

        Returns:
            The property value, or a new dict of name to value. The dict
            is a copy and does not follow later writes.

        Raises:
            UnknownPropertyError: If the property does not exist.
        """
        if name is None:
            return {key: entry.value for key, entry in self._entries.items()}
        return self.get_entry(name).value

    @overload
    def set_config(self, name: Mapping[str, Any], /) -> None: ...

    @overload
    def set_config(self, name: str, value: Any, /) -> None: ...

    def set_config(
        self, name: str | Mapping[str, Any], value: Any = MISSING, /
    ) -> None:
        """Write one property, or several from a mapping.

        A mapping is applied key by key in its iteration order. The first
        failing key aborts the rest; keys already written stay written.

        Args:
            name: Property name, or a mapping of name to value.
            value: New value when writing a single property.

        Raises:
            UnknownPropertyError: If the property does not exist and
                unknown properties are not admitted.
            PropertyTypeError: If the value's kind is not accepted.
            PropertyValidationError: If the validator rejects the value.
            ValidatorEvalError: If the validator raises.
        """
        if isinstance(name, Mapping):
            if value is not MISSING:
                raise TypeError("set_config() takes a mapping or a name and a value, not both")
            for key, item in list(name.items()):
                self._write(key, item)
            return

        if value is MISSING:
            raise TypeError(f"set_config() missing value for property '{name}'")
        self._write(name, value)

    def reset_config(self, name: str | None = None) -> None:
        """Write defaults back, for one property or all of them.

        Defaults go through the regular write checks. Resetting everything
        stops at the first failure.

        Args:
            name: Property name; omit to reset every property.

        Raises:
            UnknownPropertyError: If the property does not exist.
        """
        names = list(self._entries) if name is None else [name]
        for key in names:
            self._write(key, self.get_entry(key).default)
            StoreMetrics.get_instance().record_reset()

    def _write(self, name: str, value: Any) -> None:
        metrics = StoreMetrics.get_instance()
        entry = self._entries.get(name)

        if entry is None:
            if not self._options.add_properties_to_config_allowed:
                metrics.record_rejected()
                raise UnknownPropertyError(name)
            if not isinstance(name, str):
                metrics.record_rejected()
                raise TypeError(f"property names must be strings, got {type(name).__name__}")
            entry = ConfigurationEntry.infer(value)
            self._entries[name] = entry
            metrics.record_added()
            self._log.debug(
                "config_property_added", property=name, kind=entry.types[0].value
            )
            return

        try:
            self._check(name, entry, value)
        except ConfigurationError:
            metrics.record_rejected()
            raise

        self._entries[name] = entry.with_value(value)
        metrics.record_write()
        self._log.debug(
            "config_property_updated", property=name, kind=kind_of(value).value
        )

    def _check(self, name: str, entry: ConfigurationEntry, value: Any) -> None:
        value_kind = kind_of(value)
        if not entry.accepts(value_kind) and not self._options.allow_different_type_on_config:
            raise PropertyTypeError(name, entry.expected_types(), value_kind.value)
        run_validator(name, entry.validator, value)
