"""Pydantic models for configuration entries and store options."""

from collections.abc import Callable
from typing import Annotated, Any, ClassVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    field_validator,
    model_validator,
)

from easyconfig.kinds import ValueKind, format_kinds, kind_of, parse_kind


class StrictBaseModel(BaseModel):
    """Base model with strict, immutable defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")


def _unique_kinds(kinds: tuple[ValueKind, ...]) -> tuple[ValueKind, ...]:
    return tuple(dict.fromkeys(kinds))


class ConfigurationEntry(StrictBaseModel):
    """Stored record for one configuration property.

    Entries are immutable; a write replaces the entry with a copy
    carrying the new value.

    Attributes:
        types: Accepted kinds in declaration order.
        default: Baseline value of the property.
        value: Current value of the property.
        validator: Optional predicate a new value must satisfy.
    """

    types: Annotated[tuple[ValueKind, ...], Field(min_length=1)]
    default: Any = None
    value: Any = None
    validator: Callable[[Any], object] | None = None

    @field_validator("types", mode="after")
    @classmethod
    def drop_duplicate_types(
        cls, v: tuple[ValueKind, ...]
    ) -> tuple[ValueKind, ...]:
        """Keep the first occurrence of each kind."""
        return _unique_kinds(v)

    @classmethod
    def infer(cls, value: Any) -> "ConfigurationEntry":
        """Create an entry whose kinds and default come from the value.

        Args:
            value: Initial value.

        Returns:
            Entry accepting only the value's own kind.
        """
        return cls(types=(kind_of(value),), default=value, value=value)

    def accepts(self, kind: ValueKind) -> bool:
        """Check whether a kind is among the accepted kinds."""
        return kind in self.types

    def expected_types(self) -> str:
        """Accepted kinds formatted for messages."""
        return format_kinds(self.types)

    def with_value(self, value: Any) -> "ConfigurationEntry":
        """Return a copy of this entry holding a new value."""
        return self.model_copy(update={"value": value})


class EntryDescriptor(StrictBaseModel):
    """Explicit description of a property used to seed a store.

    ``default`` falls back to ``value`` only when it was not given at all,
    so an explicit ``None`` default is kept.
    """

    FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"value", "types", "validator", "default"}
    )

    value: Any
    types: tuple[ValueKind, ...] | None = None
    validator: Callable[[Any], object] | None = None
    default: Any = None

    @field_validator("types", mode="before")
    @classmethod
    def parse_types(cls, v: object) -> tuple[ValueKind, ...] | None:
        """Parse declared kinds from a non-empty list of kind names."""
        if v is None:
            return None
        if isinstance(v, str) or not isinstance(v, list | tuple):
            raise ValueError("types must be a non-empty list of kind names")
        if not v:
            raise ValueError("types must not be empty")
        return _unique_kinds(tuple(parse_kind(tag) for tag in v))

    @model_validator(mode="after")
    def check_declared_kinds(self) -> "EntryDescriptor":
        """Ensure value and default are of a declared kind."""
        if self.types is None:
            return self
        declared = format_kinds(self.types)
        value_kind = kind_of(self.value)
        if value_kind not in self.types:
            raise ValueError(
                f"value of kind '{value_kind.value}' is not one of '{declared}'"
            )
        if "default" in self.model_fields_set:
            default_kind = kind_of(self.default)
            if default_kind not in self.types:
                raise ValueError(
                    f"default of kind '{default_kind.value}' is not one of '{declared}'"
                )
        return self

    def to_entry(self) -> ConfigurationEntry:
        """Normalize the descriptor into a configuration entry."""
        return ConfigurationEntry(
            types=self.types or (kind_of(self.value),),
            default=self.default if "default" in self.model_fields_set else self.value,
            value=self.value,
            validator=self.validator,
        )


class StoreOptions(StrictBaseModel):
    """Behavior flags of a configuration store, fixed at construction.

    Attributes:
        add_properties_to_config_allowed: Writing an unknown property
            creates it instead of failing.
        allow_different_type_on_config: Writes skip the kind check.
    """

    add_properties_to_config_allowed: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices(
            "add_properties_to_config_allowed", "addPropertiesToConfigAllowed"
        ),
    )
    allow_different_type_on_config: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices(
            "allow_different_type_on_config", "allowDifferentTypeOnConfig"
        ),
    )
