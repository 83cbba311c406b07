"""Unit tests for value kind classification."""

import enum
from decimal import Decimal
from fractions import Fraction

import pytest

from easyconfig.kinds import ValueKind, format_kinds, kind_of, parse_kind


class Color(enum.Enum):
    """Enum used as a symbol-like value."""

    RED = "red"


class Level(enum.IntEnum):
    """Int-backed enum used as a symbol-like value."""

    LOW = 1


class Widget:
    """Plain object with a method."""

    def render(self) -> str:
        return "widget"


class TestValueKind:
    """Tests for ValueKind enum."""

    @pytest.mark.unit
    def test_all_kinds_defined(self) -> None:
        """Test that the closed set of kinds is defined."""
        assert {kind.value for kind in ValueKind} == {
            "undefined",
            "boolean",
            "number",
            "string",
            "function",
            "object",
            "symbol",
        }


class TestKindOf:
    """Tests for kind_of classification."""

    @pytest.mark.unit
    def test_none_is_undefined(self) -> None:
        assert kind_of(None) == ValueKind.UNDEFINED

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [True, False])
    def test_bool_is_boolean_not_number(self, value: bool) -> None:
        assert kind_of(value) == ValueKind.BOOLEAN

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", [0, 2, -7, 1.5, float("nan"), 3j, Decimal("1.1"), Fraction(1, 3)]
    )
    def test_numbers(self, value: object) -> None:
        assert kind_of(value) == ValueKind.NUMBER

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "hello"])
    def test_strings(self, value: str) -> None:
        assert kind_of(value) == ValueKind.STRING

    @pytest.mark.unit
    def test_callables_are_functions(self) -> None:
        """Functions, lambdas, builtins, classes and bound methods."""
        assert kind_of(lambda v: v) == ValueKind.FUNCTION
        assert kind_of(len) == ValueKind.FUNCTION
        assert kind_of(Widget) == ValueKind.FUNCTION
        assert kind_of(Widget().render) == ValueKind.FUNCTION

    @pytest.mark.unit
    def test_enum_members_are_symbols(self) -> None:
        """Enum members are symbols even when backed by int or str."""
        assert kind_of(Color.RED) == ValueKind.SYMBOL
        assert kind_of(Level.LOW) == ValueKind.SYMBOL
        assert kind_of(ValueKind.STRING) == ValueKind.SYMBOL

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [{}, {"a": 1}, [], (1, 2), b"raw", Widget()])
    def test_everything_else_is_object(self, value: object) -> None:
        assert kind_of(value) == ValueKind.OBJECT


class TestParseKind:
    """Tests for parse_kind."""

    @pytest.mark.unit
    def test_parse_string_tag(self) -> None:
        assert parse_kind("number") == ValueKind.NUMBER

    @pytest.mark.unit
    def test_parse_enum_member(self) -> None:
        assert parse_kind(ValueKind.STRING) is ValueKind.STRING

    @pytest.mark.unit
    def test_unknown_tag(self) -> None:
        with pytest.raises(ValueError, match="unknown kind 'str'"):
            parse_kind("str")

    @pytest.mark.unit
    def test_non_string_tag(self) -> None:
        with pytest.raises(ValueError, match="must be a string"):
            parse_kind(3)


class TestFormatKinds:
    """Tests for format_kinds."""

    @pytest.mark.unit
    def test_keeps_declaration_order(self) -> None:
        kinds = (ValueKind.STRING, ValueKind.BOOLEAN)
        assert format_kinds(kinds) == "string|boolean"

    @pytest.mark.unit
    def test_single_kind(self) -> None:
        assert format_kinds((ValueKind.NUMBER,)) == "number"
