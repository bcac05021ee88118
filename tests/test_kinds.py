"""Tests for deeplinks.templates.kinds — strict parsing and formatting."""

import math

import pytest

from deeplinks.templates.kinds import ValueKind, format_value, kind_of, parse_value, try_parse


class TestValueKind:
    def test_all_kinds(self) -> None:
        assert {k.value for k in ValueKind} == {"int", "double", "bool", "string"}

    def test_python_types(self) -> None:
        assert ValueKind.INT.python_type is int
        assert ValueKind.DOUBLE.python_type is float
        assert ValueKind.BOOL.python_type is bool
        assert ValueKind.STRING.python_type is str

    def test_from_string(self) -> None:
        assert ValueKind("int") is ValueKind.INT


class TestParseInt:
    def test_plain(self) -> None:
        assert parse_value("42", ValueKind.INT) == 42
        assert isinstance(parse_value("42", ValueKind.INT), int)

    def test_signed(self) -> None:
        assert parse_value("-7", ValueKind.INT) == -7
        assert parse_value("+7", ValueKind.INT) == 7

    @pytest.mark.parametrize("text", ["", "abc", "4.2", " 42", "42 ", "1_000", "0x10", "+"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_value(text, ValueKind.INT)

    def test_64_bit_bounds(self) -> None:
        assert parse_value(str(2**63 - 1), ValueKind.INT) == 2**63 - 1
        assert parse_value(str(-(2**63)), ValueKind.INT) == -(2**63)
        with pytest.raises(ValueError, match="overflows"):
            parse_value(str(2**63), ValueKind.INT)

    def test_custom_width(self) -> None:
        with pytest.raises(ValueError):
            parse_value("40000", ValueKind.INT, int_bits=16)


class TestParseDouble:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("3.14", 3.14), ("10", 10.0), ("-0.5", -0.5), (".5", 0.5), ("1.", 1.0), ("1e3", 1000.0), ("2.5E-1", 0.25)],
    )
    def test_accepts(self, text: str, expected: float) -> None:
        assert parse_value(text, ValueKind.DOUBLE) == pytest.approx(expected)

    def test_special_values(self) -> None:
        assert parse_value("inf", ValueKind.DOUBLE) == math.inf
        assert parse_value("-Infinity", ValueKind.DOUBLE) == -math.inf
        assert math.isnan(parse_value("nan", ValueKind.DOUBLE))  # type: ignore[arg-type]

    @pytest.mark.parametrize("text", ["", ".", "abc", "1_0.0", " 1.0", "1e", "e5", "1.0.0"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_value(text, ValueKind.DOUBLE)

    def test_overflow(self) -> None:
        with pytest.raises(ValueError, match="overflows"):
            parse_value("1e999", ValueKind.DOUBLE)


class TestParseBool:
    def test_literals(self) -> None:
        assert parse_value("true", ValueKind.BOOL) is True
        assert parse_value("false", ValueKind.BOOL) is False

    @pytest.mark.parametrize("text", ["True", "FALSE", "1", "0", "yes", "on", ""])
    def test_rejects_truthy_strings(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_value(text, ValueKind.BOOL)


class TestParseString:
    def test_passthrough(self) -> None:
        assert parse_value("hello world", ValueKind.STRING) == "hello world"

    def test_empty(self) -> None:
        assert parse_value("", ValueKind.STRING) == ""


class TestTryParse:
    def test_success(self) -> None:
        assert try_parse("5", ValueKind.INT) == 5

    def test_failure_is_none(self) -> None:
        assert try_parse("five", ValueKind.INT) is None

    def test_false_is_not_failure(self) -> None:
        assert try_parse("false", ValueKind.BOOL) is False


class TestKindOf:
    def test_bool_is_not_int(self) -> None:
        assert kind_of(True) is ValueKind.BOOL
        assert kind_of(1) is ValueKind.INT

    def test_others(self) -> None:
        assert kind_of(1.5) is ValueKind.DOUBLE
        assert kind_of("x") is ValueKind.STRING
        assert kind_of(None) is None


class TestFormatValue:
    def test_bool_lowercase(self) -> None:
        assert format_value(True) == "true"
        assert format_value(False) == "false"

    def test_float_keeps_decimal(self) -> None:
        assert format_value(3.0) == "3.0"

    def test_int_and_str(self) -> None:
        assert format_value(42) == "42"
        assert format_value("abc") == "abc"

    def test_no_escaping(self) -> None:
        assert format_value("a b/c") == "a b/c"
