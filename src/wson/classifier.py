"""
Value classification for WSON.

Each trimmed value span is tried against an ordered cascade; the first
rule that matches decides the kind:

     1. empty                      -> Null
     2. "..."                      -> String
     3. true / false (any case)    -> Bool
     4. null (any case)            -> Null
     5. signed 64-bit integer      -> Int
     6. 1.2 / 1.2.3 / ...          -> Version
     7. floating point literal     -> Float
     8. YYYY-MM-DD                 -> Date
     9. YYYY-MM-DD HH:MM:SS        -> DateTime
    10. {...}                      -> Object
    11. [...]                      -> Array
    12. anything else              -> InvalidValueError

ARCHITECTURAL RULE:
    The order is part of the format. Integers come before versions and
    versions before floats, so `42` is an Int and `1.2` is a Version,
    not a Float. Do not reorder.
"""

import re
from datetime import date, datetime
from typing import Optional, Protocol

from wson.errors import InvalidValueError
from wson.position import Position
from wson.values import (
    Bool,
    Date,
    DateTime,
    Float,
    INT64_MAX,
    INT64_MIN,
    Int,
    Null,
    String,
    U32_MAX,
    Value,
    Version,
)

INT_RE = re.compile(r"[+-]?[0-9]+")
VERSION_RE = re.compile(r"[0-9]+(?:\.[0-9]+)+")
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DATETIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


class NestedBuilder(Protocol):
    """Whatever builds compound values (the tree builder)."""

    def build_object(self, text: str, position: Position) -> Value: ...

    def build_array(self, text: str, position: Position) -> Value: ...


def _parse_int(text: str) -> Optional[Int]:
    if not INT_RE.fullmatch(text):
        return None
    sign = "-" if text.startswith("-") else ""
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 19:
        return None
    number = int(sign + digits)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return Int(number)


def _parse_version(text: str) -> Optional[Version]:
    if not VERSION_RE.fullmatch(text):
        return None
    parts = [part.lstrip("0") or "0" for part in text.split(".")]
    if any(len(part) > 10 for part in parts):
        return None
    components = tuple(int(part) for part in parts)
    if any(c > U32_MAX for c in components):
        return None
    return Version(components)


def _parse_float(text: str) -> Optional[Float]:
    if not FLOAT_RE.fullmatch(text):
        return None
    return Float(float(text))


def _parse_date(text: str) -> Optional[Date]:
    if not DATE_RE.fullmatch(text):
        return None
    try:
        return Date.from_date(date.fromisoformat(text))
    except ValueError:
        return None


def _parse_datetime(text: str) -> Optional[DateTime]:
    if not DATETIME_RE.fullmatch(text):
        return None
    try:
        return DateTime.from_datetime(datetime.strptime(text, "%Y-%m-%d %H:%M:%S"))
    except ValueError:
        return None


def classify_scalar(text: str) -> Optional[Value]:
    """
    Apply cascade rules 1-9 to a trimmed span.

    Returns:
        The scalar Value, or None if the span is not a scalar literal
    """
    if not text:
        return Null()

    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return String(text[1:-1])

    lowered = text.lower()
    if lowered == "true":
        return Bool(True)
    if lowered == "false":
        return Bool(False)
    if lowered == "null":
        return Null()

    for rule in (_parse_int, _parse_version, _parse_float, _parse_date, _parse_datetime):
        value = rule(text)
        if value is not None:
            return value

    return None


def classify(text: str, position: Position, builder: NestedBuilder) -> Value:
    """
    Classify a value span, recursing into `builder` for objects and arrays.

    Args:
        text: Value text (surrounding whitespace is ignored)
        position: Where the value starts, for error reporting
        builder: Tree builder used for `{...}` and `[...]`

    Returns:
        The classified Value

    Raises:
        InvalidValueError: If no cascade rule matches
        WsonParseError: Propagated unchanged from nested values
    """
    text = text.strip()

    value = classify_scalar(text)
    if value is not None:
        return value

    if text.startswith("{") and text.endswith("}"):
        return builder.build_object(text, position)

    if text.startswith("[") and text.endswith("]"):
        return builder.build_array(text, position)

    raise InvalidValueError(text, position.line, position.column)


__all__ = ["NestedBuilder", "classify_scalar", "classify"]
