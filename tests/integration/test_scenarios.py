"""Integration tests for end-to-end store behavior."""

import pytest

from easyconfig import (
    ConfigurationStore,
    PropertyTypeError,
    PropertyValidationError,
    UnknownPropertyError,
    ValidatorEvalError,
)


@pytest.mark.integration
class TestStoreScenarios:
    """End-to-end scenarios through the public package API."""

    def test_boolean_property_from_raw_value(self) -> None:
        store = ConfigurationStore({"a": False})

        with pytest.raises(UnknownPropertyError):
            store.set_config("foo", True)
        with pytest.raises(PropertyTypeError):
            store.set_config("a", 2)

        store.set_config("a", True)
        assert store.get_config("a") is True

    def test_multiple_declared_kinds(self) -> None:
        store = ConfigurationStore({"a": {"types": ["string", "boolean"], "value": True}})

        store.set_config("a", "hello")

        assert store.get_config("a") == "hello"

    def test_admitted_property_keeps_inferred_kind(self) -> None:
        store = ConfigurationStore({}, {"addPropertiesToConfigAllowed": True})

        store.set_config("x", 5)
        with pytest.raises(PropertyTypeError):
            store.set_config("x", "str")

        assert store.get_config("x") == 5

    def test_validated_property(self) -> None:
        store = ConfigurationStore(
            {
                "foo": {
                    "types": ["string"],
                    "value": "bar",
                    "validator": lambda v: len(v) > 0,
                }
            }
        )

        with pytest.raises(PropertyValidationError):
            store.set_config("foo", "")
        store.set_config("foo", "baz")

        assert store.get_config("foo") == "baz"

    def test_unknown_reads_always_fail(self) -> None:
        admitting = ConfigurationStore({}, {"addPropertiesToConfigAllowed": True})
        strict = ConfigurationStore({"a": 1})

        for store in (admitting, strict):
            with pytest.raises(UnknownPropertyError):
                store.get_config("missing")

    def test_mismatch_admission_still_validates(self) -> None:
        store = ConfigurationStore(
            {"port": {"value": 8080, "validator": lambda v: 0 < v < 65536}},
            {"allowDifferentTypeOnConfig": True},
        )

        with pytest.raises(PropertyValidationError):
            store.set_config("port", 70000)
        with pytest.raises(ValidatorEvalError):
            store.set_config("port", "8080")

        store.set_config("port", 443.0)
        assert store.get_config("port") == 443.0

    @pytest.mark.parametrize(
        ("value", "accepted"),
        [(True, True), ("on", True), (1, False), (None, False), ([], False)],
    )
    def test_type_check_matches_declared_kinds(
        self, value: object, accepted: bool
    ) -> None:
        store = ConfigurationStore({"a": {"types": ["boolean", "string"], "value": False}})

        if accepted:
            store.set_config("a", value)
            assert store.get_config("a") == value
        else:
            with pytest.raises(PropertyTypeError):
                store.set_config("a", value)
            assert store.get_config("a") is False
