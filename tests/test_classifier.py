"""
Tests for the value classification cascade.

The order of the cascade is part of the format, so several tests pin
down which rule wins when more than one could apply.
"""

import math

import pytest
from wson.classifier import classify, classify_scalar
from wson.errors import InvalidValueError
from wson.position import Position
from wson.values import (
    Array,
    Bool,
    Date,
    DateTime,
    Document,
    Float,
    Int,
    Null,
    Object,
    String,
    Version,
)


class RecordingBuilder:
    """Stands in for the tree builder and records what it was asked to build."""

    def __init__(self):
        self.calls = []

    def build_object(self, text, position):
        self.calls.append(("object", text, position))
        return Object(Document())

    def build_array(self, text, position):
        self.calls.append(("array", text, position))
        return Array(())


class TestScalarCascade:

    @pytest.mark.parametrize("text,expected", [
        ("", Null()),
        ('""', String("")),
        ('"hello world"', String("hello world")),
        ("true", Bool(True)),
        ("FALSE", Bool(False)),
        ("True", Bool(True)),
        ("null", Null()),
        ("NULL", Null()),
        ("42", Int(42)),
        ("-7", Int(-7)),
        ("+5", Int(5)),
        ("007", Int(7)),
        ("1.2", Version((1, 2))),
        ("1.2.3", Version((1, 2, 3))),
        ("10.0.0.1", Version((10, 0, 0, 1))),
        ("1.5e2", Float(150.0)),
        ("-1.5", Float(-1.5)),
        (".5", Float(0.5)),
        ("1.", Float(1.0)),
        ("2E-3", Float(0.002)),
        ("2024-02-29", Date("2024-02-29")),
        ("2024-02-29 23:59:59", DateTime("2024-02-29 23:59:59")),
    ])
    def test_classification(self, text, expected):
        assert classify_scalar(text) == expected

    def test_integer_beats_everything_numeric(self):
        assert classify_scalar("42") == Int(42)

    def test_version_beats_float(self):
        """A two-component dotted numeral is a Version, not a Float."""
        assert classify_scalar("1.2") == Version((1, 2))

    def test_int64_bounds(self):
        assert classify_scalar("9223372036854775807") == Int(2**63 - 1)
        assert classify_scalar("-9223372036854775808") == Int(-(2**63))

    def test_integer_overflow_falls_to_float(self):
        assert classify_scalar("9223372036854775808") == Float(9223372036854775808.0)

    def test_huge_integer_literal(self):
        value = classify_scalar("9" * 5000)
        assert isinstance(value, Float)
        assert math.isinf(value.value)

    def test_version_component_overflow_falls_to_float(self):
        """A component beyond 32 bits cannot be a Version."""
        assert classify_scalar("1.4294967296") == Float(1.4294967296)

    def test_version_component_at_u32_max(self):
        assert classify_scalar("4294967295.0") == Version((4294967295, 0))

    def test_special_floats(self):
        assert math.isinf(classify_scalar("inf").value)
        assert classify_scalar("-Infinity").value == float("-inf")
        assert math.isnan(classify_scalar("NaN").value)

    @pytest.mark.parametrize("text", ["2024-13-01", "2023-02-29", "2024-00-10", "0000-01-01"])
    def test_invalid_calendar_date_is_not_a_date(self, text):
        assert classify_scalar(text) is None

    @pytest.mark.parametrize("text", ["2024-1-5", "24-01-05", "2024/01/05"])
    def test_date_pattern_is_exact(self, text):
        assert classify_scalar(text) is None

    def test_invalid_datetime_is_not_a_datetime(self):
        assert classify_scalar("2024-01-01 24:00:00") is None
        assert classify_scalar("2024-01-01T10:00:00") is None

    def test_strings_are_not_unescaped(self):
        assert classify_scalar(r'"a\nb"') == String(r"a\nb")

    def test_single_quote_character_is_not_a_string(self):
        assert classify_scalar('"') is None

    @pytest.mark.parametrize("text", ["hello", "1_000", "1.2.x", "0x10", "yes"])
    def test_unclassifiable(self, text):
        assert classify_scalar(text) is None


class TestClassify:

    def test_scalar_does_not_touch_builder(self):
        builder = RecordingBuilder()
        assert classify("  42  ", Position(1, 1), builder) == Int(42)
        assert builder.calls == []

    def test_object_delegates_to_builder(self):
        builder = RecordingBuilder()
        result = classify("{ a = 1 }", Position(2, 3), builder)
        assert result == Object(Document())
        assert builder.calls == [("object", "{ a = 1 }", Position(2, 3))]

    def test_array_delegates_to_builder(self):
        builder = RecordingBuilder()
        classify("[1, 2]", Position(1, 1), builder)
        assert builder.calls[0][0] == "array"

    def test_invalid_value_error(self):
        with pytest.raises(InvalidValueError) as exc_info:
            classify("hello", Position(3, 9), RecordingBuilder())
        err = exc_info.value
        assert err.text == "hello"
        assert (err.line, err.column) == (3, 9)
        assert str(err) == "Invalid value: hello (line 3, column 9)"

    def test_unbalanced_brace_is_invalid(self):
        with pytest.raises(InvalidValueError):
            classify("{ a = 1", Position(1, 1), RecordingBuilder())
