"""
WSON: a human-friendly, JSON-adjacent configuration format.

    {
        // comments: //, # and /* ... */
        name = "Alice",
        born: 1990-04-01,
        release = 1.2.3,
        tags = ["a", "b"]
    }

Public API:
    loads(text)      -> Document
    dumps(document)  -> str
    validate(text)   -> bool
    load(path_or_file) / dump(document, path_or_file)

Parsing and serialization are pure functions over in-memory text. Each
call is independent; nothing is cached between calls.
"""

import os
from collections.abc import Mapping
from typing import IO, Optional, Union

from wson.config import ParserOptions, SerializerOptions
from wson.errors import (
    InvalidValueError,
    MalformedStructureError,
    NestingTooDeepError,
    WsonError,
    WsonParseError,
    WsonSerializeError,
)
from wson.parser import Parser
from wson.serializer import Serializer
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
    Value,
    ValueKind,
    Version,
)

__version__ = "0.1.0"

PathOrFile = Union[str, os.PathLike, IO[str]]


def loads(text: str, *, options: Optional[ParserOptions] = None) -> Document:
    """
    Parse WSON text into a Document.

    Raises:
        WsonParseError: On the first grammar violation or unclassifiable value
    """
    return Parser(options).parse(text)


def dumps(document: Mapping, *, options: Optional[SerializerOptions] = None) -> str:
    """
    Render a Document as canonical WSON text.

    Raises:
        WsonSerializeError: If the document holds unsupported values or
            cannot be rendered
    """
    return Serializer(options).serialize(document)


def validate(text: str, *, options: Optional[ParserOptions] = None) -> bool:
    """Return True if `loads(text)` would succeed."""
    try:
        loads(text, options=options)
    except WsonParseError:
        return False
    return True


def load(source: PathOrFile, *, options: Optional[ParserOptions] = None) -> Document:
    """
    Parse a WSON file.

    Args:
        source: Path to a UTF-8 file, or an open text file object

    Raises:
        FileNotFoundError: If the path does not exist
        WsonParseError: If the content is not valid WSON
    """
    if hasattr(source, "read"):
        return loads(source.read(), options=options)
    with open(source, "r", encoding="utf-8") as f:
        return loads(f.read(), options=options)


def dump(document: Mapping, target: PathOrFile, *, options: Optional[SerializerOptions] = None) -> None:
    """
    Write a document as WSON to a path or an open text file object.

    Raises:
        WsonSerializeError: If the document cannot be rendered or written
    """
    text = dumps(document, options=options)
    try:
        if hasattr(target, "write"):
            target.write(text)
            return
        with open(target, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as exc:
        raise WsonSerializeError(f"Failed to write WSON output: {exc}") from exc


__all__ = [
    "loads",
    "dumps",
    "validate",
    "load",
    "dump",
    "ParserOptions",
    "SerializerOptions",
    "WsonError",
    "WsonParseError",
    "MalformedStructureError",
    "InvalidValueError",
    "NestingTooDeepError",
    "WsonSerializeError",
    "ValueKind",
    "Value",
    "Null",
    "Bool",
    "Int",
    "Float",
    "String",
    "Date",
    "DateTime",
    "Version",
    "Array",
    "Object",
    "Document",
]
