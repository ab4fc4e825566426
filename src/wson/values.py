"""
WSON Value Model

Every parsed WSON value is one of ten immutable node types:

    Null, Bool, Int, Float, String,
    Date, DateTime, Version,
    Array, Object

and a document is a `Document`: a mapping from key to Value that always
iterates in sorted key order.

ARCHITECTURAL RULE:
    These objects hold structure only.
    They know nothing about text, comments or indentation.
    Parsing lives in `wson.parser`, rendering in `wson.serializer`.
"""

from abc import ABC
from collections.abc import MutableMapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Iterator, Tuple

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
U32_MAX = 2**32 - 1


class ValueKind(Enum):
    """The ten kinds of WSON value."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    VERSION = "version"
    ARRAY = "array"
    OBJECT = "object"


class Value(ABC):
    """
    Base class for all WSON values.

    Subclasses set `kind` so callers can dispatch without isinstance chains.
    """

    kind: ValueKind


@dataclass(frozen=True)
class Null(Value):
    """The absent value (`null` or an empty value slot)."""

    kind = ValueKind.NULL


@dataclass(frozen=True)
class Bool(Value):
    kind = ValueKind.BOOL

    value: bool


@dataclass(frozen=True)
class Int(Value):
    """Signed 64-bit integer."""

    kind = ValueKind.INT

    value: int


@dataclass(frozen=True)
class Float(Value):
    kind = ValueKind.FLOAT

    value: float


@dataclass(frozen=True)
class String(Value):
    """
    Double-quoted text.

    IMPORTANT:
        The grammar has no escape sequences, so `value` must not contain
        a double quote if it is to survive a serialize/parse round-trip.
    """

    kind = ValueKind.STRING

    value: str


@dataclass(frozen=True)
class Date(Value):
    """
    Calendar date stored as canonical `YYYY-MM-DD` text.

    Example:
        Date("2024-02-29").as_date() == datetime.date(2024, 2, 29)
    """

    kind = ValueKind.DATE

    value: str

    def as_date(self) -> date:
        return date.fromisoformat(self.value)

    @classmethod
    def from_date(cls, d: date) -> "Date":
        return cls(d.isoformat())


@dataclass(frozen=True)
class DateTime(Value):
    """Calendar date-time stored as canonical `YYYY-MM-DD HH:MM:SS` text."""

    kind = ValueKind.DATETIME

    value: str

    def as_datetime(self) -> datetime:
        return datetime.fromisoformat(self.value)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateTime":
        """Render `dt` at second precision; tzinfo and microseconds are dropped."""
        return cls(dt.replace(tzinfo=None, microsecond=0).isoformat(sep=" "))


@dataclass(frozen=True)
class Version(Value):
    """
    Dotted version number such as 1.2.3.

    Properties:
        components: Non-empty tuple of unsigned 32-bit integers
    """

    kind = ValueKind.VERSION

    components: Tuple[int, ...]

    def __post_init__(self):
        components = tuple(self.components)
        if not components:
            raise ValueError("Version requires at least one component")
        for c in components:
            if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= U32_MAX:
                raise ValueError(f"Invalid version component: {c!r}")
        object.__setattr__(self, "components", components)

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)


@dataclass(frozen=True)
class Array(Value):
    """Ordered sequence of values."""

    kind = ValueKind.ARRAY

    items: Tuple[Value, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dataclass(frozen=True)
class Object(Value):
    """A nested document. Unhashable, like the mutable Document it wraps."""

    kind = ValueKind.OBJECT

    document: "Document"

    __hash__ = None


class Document(MutableMapping):
    """
    Mapping from string key to Value, iterated in sorted key order.

    Insertion order is NOT preserved. The serializer emits keys in
    exactly this order.

    Example:
        doc = Document()
        doc["name"] = String("Alice")
        doc["age"] = Int(30)
        list(doc) == ["age", "name"]
    """

    def __init__(self, *args, **kwargs):
        self._entries: Dict[str, Value] = {}
        self.update(*args, **kwargs)

    def __getitem__(self, key: str) -> Value:
        return self._entries[key]

    def __setitem__(self, key: str, value: Value) -> None:
        if not isinstance(key, str):
            raise TypeError(f"Document keys must be str, got {type(key).__name__}")
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"Document({{{body}}})"


__all__ = [
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
