"""
WSON Serializer (Document → Canonical Text).

Output layout:

    {
        alpha = 1,

        beta = [
            "x",
            "y"
        ],

        gamma = {
            nested = 1.2.3
        }
    }

    - one `key = value` per line, entries separated by a blank line
    - one array element per line
    - keys in sorted order
    - 4 spaces per nesting level (SerializerOptions.indent)

The output re-parses to an equal Document as long as strings contain no
double quote and keys contain no separator characters.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from wson.classifier import INT_RE, VERSION_RE
from wson.config import SerializerOptions
from wson.convert import from_python
from wson.errors import WsonSerializeError
from wson.log import get_logger
from wson.values import (
    Array,
    Bool,
    Date,
    DateTime,
    Float,
    Int,
    Null,
    Object,
    String,
    Value,
    Version,
)

logger = get_logger("serializer")


def format_float(number: float) -> str:
    """
    Render a float so that it re-parses as a Float.

    Uses the shortest round-trippable repr. Text that the cascade would
    read as an Int or Version (`1.5`, `100.0`) gets an `e0` exponent.
    """
    text = repr(number)
    if INT_RE.fullmatch(text) or VERSION_RE.fullmatch(text):
        text += "e0"
    return text


class Serializer:
    """Renders Documents as canonical WSON text."""

    def __init__(self, options: Optional[SerializerOptions] = None):
        self.options = options or SerializerOptions()
        self.unit = " " * self.options.indent

    def serialize(self, document: Mapping) -> str:
        """
        Render a document.

        Args:
            document: Document, or any mapping of str to Value / native
                Python values (converted with wson.convert.from_python)

        Returns:
            WSON text wrapped in `{` and `}`

        Raises:
            WsonSerializeError: On unsupported values, nesting beyond
                options.max_depth, or resource exhaustion
        """
        try:
            text = "{\n" + self._map(document, self.unit, 1) + "\n}"
        except (MemoryError, RecursionError) as exc:
            raise WsonSerializeError(f"Failed to serialize document: {exc!r}") from exc

        logger.debug("Serialized %d top-level keys into %d characters", len(document), len(text))
        return text

    def _map(self, document: Mapping, indent: str, depth: int) -> str:
        parts: List[str] = []
        for key in sorted(document):
            if not isinstance(key, str):
                raise WsonSerializeError(f"Document keys must be str, got {type(key).__name__}")
            rendered = self._value(document[key], indent, depth)
            parts.append(f"{indent}{key} = {rendered}")
        return ",\n\n".join(parts)

    def _list(self, items: Array, indent: str, depth: int) -> str:
        return ",\n".join(indent + self._value(item, indent, depth) for item in items)

    def _nested(self, depth: int) -> int:
        depth += 1
        if depth > self.options.max_depth:
            raise WsonSerializeError(
                f"Nesting exceeds maximum depth of {self.options.max_depth}"
            )
        return depth

    def _value(self, value: Any, indent: str, depth: int) -> str:
        value = _coerce(value)

        if isinstance(value, Null):
            return "null"
        if isinstance(value, Bool):
            return "true" if value.value else "false"
        if isinstance(value, Int):
            return str(value.value)
        if isinstance(value, Float):
            return format_float(value.value)
        if isinstance(value, String):
            return f'"{value.value}"'
        if isinstance(value, (Date, DateTime)):
            return value.value
        if isinstance(value, Version):
            return str(value)
        if isinstance(value, Array):
            inner = self._list(value, indent + self.unit, self._nested(depth))
            return f"[\n{inner}\n{indent}]"
        if isinstance(value, Object):
            inner = self._map(value.document, indent + self.unit, self._nested(depth))
            return f"{{\n{inner}\n{indent}}}"

        raise WsonSerializeError(f"Unsupported value type: {type(value).__name__}")


def _coerce(value: Any) -> Value:
    if isinstance(value, Value):
        return value
    try:
        return from_python(value)
    except (TypeError, ValueError) as exc:
        raise WsonSerializeError(str(exc)) from exc


def serialize(document: Mapping, options: Optional[SerializerOptions] = None) -> str:
    """Render a document with a fresh Serializer."""
    return Serializer(options).serialize(document)


__all__ = ["Serializer", "serialize", "format_float"]
