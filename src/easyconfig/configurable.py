"""Configuration access for application objects, by composition."""

from collections.abc import Mapping
from typing import Any, Protocol, overload, runtime_checkable

from easyconfig.models import StoreOptions
from easyconfig.store import MISSING, ConfigurationStore


@runtime_checkable
class SupportsConfiguration(Protocol):
    """Protocol for objects exposing configuration reads and writes.

    ConfigurationStore satisfies it directly; Configurable subclasses
    satisfy it by forwarding to the store they own.
    """

    def get_config(self, name: str | None = None) -> Any:
        """Read one property value, or a snapshot of all of them."""
        ...

    def set_config(self, name: str | Mapping[str, Any], value: Any = ..., /) -> None:
        """Write one property, or several from a mapping."""
        ...


class Configurable:
    """Base for objects that expose their own configuration properties.

    The properties live in an owned ConfigurationStore; this class only
    forwards to it. Objects that already extend another base can hold a
    store from ``ConfigurationStore.create`` and forward the same calls.

    Example:
        class Renderer(Configurable):
            def __init__(self) -> None:
                super().__init__({"width": 80, "color": True})
    """

    def __init__(
        self,
        spec: Mapping[str, Any] | None = None,
        options: StoreOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Create the owned store.

        Args:
            spec: Property name to raw value or entry descriptor.
            options: Behavior flags for the store.

        Raises:
            SetupError: If an entry or the options are malformed.
        """
        self._configuration = ConfigurationStore(spec, options)

    @property
    def configuration(self) -> ConfigurationStore:
        """The store holding this object's properties."""
        return self._configuration

    @overload
    def get_config(self) -> dict[str, Any]: ...

    @overload
    def get_config(self, name: str) -> Any: ...

    def get_config(self, name: str | None = None) -> Any:
        """Read one property value, or a snapshot of all of them."""
        if name is None:
            return self._configuration.get_config()
        return self._configuration.get_config(name)

    @overload
    def set_config(self, name: Mapping[str, Any], /) -> None: ...

    @overload
    def set_config(self, name: str, value: Any, /) -> None: ...

    def set_config(
        self, name: str | Mapping[str, Any], value: Any = MISSING, /
    ) -> None:
        """Write one property, or several from a mapping."""
        self._configuration.set_config(name, value)

    def reset_config(self, name: str | None = None) -> None:
        """Write defaults back, for one property or all of them."""
        self._configuration.reset_config(name)
