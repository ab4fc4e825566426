"""
Tests for the canonical WSON serializer.

These tests pin down the exact layout and check that serializer output
parses back to an equal Document.
"""

import math
from datetime import date

import pytest
from wson.config import SerializerOptions
from wson.errors import WsonSerializeError
from wson.parser import parse
from wson.serializer import Serializer, format_float, serialize
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


class TestLayout:

    def test_single_version_entry(self):
        assert serialize(Document({"v": Version((1, 2, 3))})) == "{\n    v = 1.2.3\n}"

    def test_entries_sorted_and_blank_line_separated(self):
        document = Document({"b": Int(2), "a": Int(1)})
        assert serialize(document) == "{\n    a = 1,\n\n    b = 2\n}"

    def test_plain_dict_sorted(self):
        assert serialize({"z": Int(1), "m": Int(2)}) == "{\n    m = 2,\n\n    z = 1\n}"

    def test_empty_document(self):
        assert serialize(Document()) == "{\n\n}"

    def test_scalars(self):
        document = Document({
            "a": Null(),
            "b": Bool(False),
            "c": String("hi"),
            "d": Date("2024-01-02"),
            "e": DateTime("2024-01-02 03:04:05"),
        })
        assert serialize(document) == (
            "{\n"
            "    a = null,\n\n"
            "    b = false,\n\n"
            '    c = "hi",\n\n'
            "    d = 2024-01-02,\n\n"
            "    e = 2024-01-02 03:04:05\n"
            "}"
        )

    def test_array_layout(self):
        document = Document({"a": Array((Int(1), Int(2)))})
        assert serialize(document) == "{\n    a = [\n        1,\n        2\n    ]\n}"

    def test_nested_object_layout(self):
        inner = Document({"y": Int(2), "x": Int(1)})
        document = Document({"o": Object(inner)})
        assert serialize(document) == (
            "{\n"
            "    o = {\n"
            "        x = 1,\n\n"
            "        y = 2\n"
            "    }\n"
            "}"
        )

    def test_object_inside_array(self):
        document = Document({"a": Array((Object(Document({"k": Int(1)})),))})
        assert serialize(document) == (
            "{\n"
            "    a = [\n"
            "        {\n"
            "            k = 1\n"
            "        }\n"
            "    ]\n"
            "}"
        )

    def test_empty_array(self):
        assert serialize(Document({"a": Array(())})) == "{\n    a = [\n\n    ]\n}"

    def test_custom_indent(self):
        document = Document({"a": Array((Int(1),))})
        text = Serializer(SerializerOptions(indent=2)).serialize(document)
        assert text == "{\n  a = [\n    1\n  ]\n}"


class TestFloatFormatting:

    @pytest.mark.parametrize("number,text", [
        (1.5, "1.5e0"),
        (100.0, "100.0e0"),
        (-1.5, "-1.5"),
        (1e20, "1e+20"),
        (1.5e-07, "1.5e-07"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
    ])
    def test_format_float(self, number, text):
        assert format_float(number) == text

    @pytest.mark.parametrize("number", [0.1, 1.5, 100.0, -2.25, 1e300, 5e-324, 3.0])
    def test_float_reparses_as_float(self, number):
        document = parse(serialize(Document({"f": Float(number)})))
        assert document["f"] == Float(number)

    def test_nan_reparses_as_nan(self):
        document = parse(serialize(Document({"f": Float(float("nan"))})))
        assert isinstance(document["f"], Float)
        assert math.isnan(document["f"].value)


class TestRoundTrip:

    def test_every_kind(self):
        inner = Document({"deep": Array((Version((0, 1)), Null(), Bool(True)))})
        document = Document({
            "name": String("Alice, with comma"),
            "age": Int(30),
            "ratio": Float(0.5),
            "born": Date("1990-04-01"),
            "seen": DateTime("2024-02-29 13:45:00"),
            "release": Version((2, 4, 1)),
            "tags": Array((String("a"), String("b"))),
            "nested": Object(inner),
            "nothing": Null(),
            "url": String("http://example.com/#x"),
        })
        restored = parse(serialize(document))
        assert restored == document

    @pytest.mark.parametrize("text", ["a\n\nb", "a  \nb", "line one\n    indented\n"])
    def test_multiline_strings(self, text):
        """Strings spanning lines keep blank lines and trailing spaces."""
        document = Document({"s": String(text)})
        assert parse(serialize(document)) == document

    def test_single_component_version_does_not_round_trip_as_version(self):
        """`7` re-parses as an Int: a one-component Version renders bare."""
        assert parse(serialize(Document({"v": Version((7,))})))["v"] == Int(7)


class TestNativeValues:

    def test_native_python_values_are_converted(self):
        text = serialize({"a": 1, "b": "x", "c": [True, None], "d": date(2024, 1, 2)})
        assert parse(text) == Document({
            "a": Int(1),
            "b": String("x"),
            "c": Array((Bool(True), Null())),
            "d": Date("2024-01-02"),
        })

    def test_unsupported_type_raises(self):
        with pytest.raises(WsonSerializeError):
            serialize({"a": object()})

    def test_non_string_key_raises(self):
        with pytest.raises(WsonSerializeError):
            serialize({1: Int(1)})


class TestDepthGuard:

    def test_nesting_beyond_limit(self):
        value = Int(0)
        for _ in range(5):
            value = Array((value,))
        serializer = Serializer(SerializerOptions(max_depth=5))
        with pytest.raises(WsonSerializeError):
            serializer.serialize(Document({"a": value}))

    def test_nesting_within_limit(self):
        value = Int(0)
        for _ in range(4):
            value = Array((value,))
        serializer = Serializer(SerializerOptions(max_depth=5))
        assert serializer.serialize(Document({"a": value})).count("[") == 4
