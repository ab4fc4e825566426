"""
Conversion between WSON values and native Python / JSON / YAML.

Native mapping:

    Null      <-> None
    Bool      <-> bool
    Int       <-> int
    Float     <-> float
    String    <-> str
    Date      <-> datetime.date
    DateTime  <-> datetime.datetime
    Version   <-> tuple of ints
    Array     <-> list
    Object    <-> dict

JSON and YAML have no version type, and JSON has no date type, so the
exports render those as strings. Importing such a file back gives String
values: the JSON/YAML round-trip is lossy for those kinds by nature.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict

import yaml

from wson.values import (
    Array,
    Bool,
    Date,
    DateTime,
    Document,
    Float,
    INT64_MAX,
    INT64_MIN,
    Int,
    Null,
    Object,
    String,
    Value,
    Version,
)


def to_python(value: Value) -> Any:
    if isinstance(value, Null):
        return None
    if isinstance(value, (Bool, Int, Float, String)):
        return value.value
    if isinstance(value, Date):
        return value.as_date()
    if isinstance(value, DateTime):
        return value.as_datetime()
    if isinstance(value, Version):
        return value.components
    if isinstance(value, Array):
        return [to_python(item) for item in value]
    if isinstance(value, Object):
        return document_to_dict(value.document)
    raise TypeError(f"Unsupported WSON value type: {type(value)}")


def from_python(obj: Any) -> Value:
    """
    Convert a native Python value to a WSON Value.

    Values that already are WSON Values are returned unchanged. A tuple
    made only of ints becomes a Version; any other list or tuple becomes
    an Array.

    Raises:
        TypeError: For types with no WSON counterpart or non-str keys
        ValueError: For ints outside 64 bits or invalid version components
    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        if not INT64_MIN <= obj <= INT64_MAX:
            raise ValueError(f"Integer out of 64-bit range: {obj}")
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, datetime):
        return DateTime.from_datetime(obj)
    if isinstance(obj, date):
        return Date.from_date(obj)
    if isinstance(obj, tuple) and obj and all(isinstance(c, int) and not isinstance(c, bool) for c in obj):
        return Version(obj)
    if isinstance(obj, (list, tuple)):
        return Array(tuple(from_python(item) for item in obj))
    if isinstance(obj, Mapping):
        return Object(document_from_dict(obj))
    raise TypeError(f"Unsupported Python type for WSON: {type(obj).__name__}")


def document_to_dict(document: Document) -> Dict[str, Any]:
    return {key: to_python(value) for key, value in document.items()}


def document_from_dict(d: Mapping) -> Document:
    document = Document()
    for key, value in d.items():
        if not isinstance(key, str):
            raise TypeError(f"Document keys must be str, got {type(key).__name__}")
        document[key] = from_python(value)
    return document


def _to_plain(value: Value, keep_dates: bool) -> Any:
    """Like to_python, but only with types JSON (or YAML) can represent."""
    if isinstance(value, Version):
        return str(value)
    if isinstance(value, (Date, DateTime)):
        return to_python(value) if keep_dates else value.value
    if isinstance(value, Array):
        return [_to_plain(item, keep_dates) for item in value]
    if isinstance(value, Object):
        return {k: _to_plain(v, keep_dates) for k, v in value.document.items()}
    return to_python(value)


def _document_to_plain(document: Document, keep_dates: bool) -> Dict[str, Any]:
    return {key: _to_plain(value, keep_dates) for key, value in document.items()}


def to_json(document: Document, indent: int | None = 2) -> str:
    return json.dumps(_document_to_plain(document, keep_dates=False), indent=indent, sort_keys=True)


def from_json(s: str) -> Document:
    d = json.loads(s)
    if not isinstance(d, dict):
        raise TypeError(f"JSON top level must be an object, got {type(d).__name__}")
    return document_from_dict(d)


def to_yaml(document: Document) -> str:
    return yaml.safe_dump(_document_to_plain(document, keep_dates=True), sort_keys=True, allow_unicode=True)


def from_yaml(s: str) -> Document:
    d = yaml.safe_load(s)
    if d is None:
        return Document()
    if not isinstance(d, dict):
        raise TypeError(f"YAML top level must be a mapping, got {type(d).__name__}")
    return document_from_dict(d)


__all__ = [
    "to_python",
    "from_python",
    "document_to_dict",
    "document_from_dict",
    "to_json",
    "from_json",
    "to_yaml",
    "from_yaml",
]
