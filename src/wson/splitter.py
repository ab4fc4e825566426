"""
Structural splitting of object and array bodies.

Given a span that starts with `{` and ends with `}` (or `[` / `]`), the
interior is scanned character by character with two depth counters, one
for braces and one for brackets:

    - `,` separates segments only when both depths are zero
    - in an object segment, the first `=` or `:` at depth zero ends the key;
      later separators are ordinary value text

Nested values are NOT parsed here. Each segment comes back as trimmed text
plus the position of its first character so the tree builder can classify
it and report errors in the right place.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from wson.errors import MalformedStructureError
from wson.position import Position

KEY_SEPARATORS = ("=", ":")


@dataclass
class Segment:
    """A trimmed value span and where it starts."""
    text: str
    position: Position


@dataclass
class ObjectEntry:
    """One `key = value` pair of an object body."""
    key: str
    value: Segment


@dataclass
class _Accumulator:
    """Text collected for the segment currently being scanned."""
    key: List[str] = field(default_factory=list)
    value: List[str] = field(default_factory=list)
    value_start: Optional[Position] = None
    in_key: bool = True

    def push(self, ch: str, pos: Position) -> None:
        if self.in_key:
            self.key.append(ch)
            return
        if self.value_start is None and not ch.isspace():
            self.value_start = pos.copy()
        self.value.append(ch)

    def is_blank(self) -> bool:
        return not "".join(self.key).strip() and not "".join(self.value).strip()

    def close(self, pos: Position) -> None:
        # A blank value reports where its segment ended.
        if self.value_start is None:
            self.value_start = pos.copy()

    def segment(self) -> Segment:
        return Segment("".join(self.value).strip(), self.value_start or Position())

    def entry(self) -> ObjectEntry:
        return ObjectEntry("".join(self.key).strip(), self.segment())


def _check_brackets(text: str, opening: str, closing: str, start: Position, what: str) -> None:
    if len(text) < 2 or not text.startswith(opening) or not text.endswith(closing):
        raise MalformedStructureError(
            f"WSON format must start and end with {what}.", start.line, start.column
        )


def _scan(text: str, start: Position, is_object: bool, quote_aware: bool) -> List[_Accumulator]:
    """
    Scan the interior of `text` and return the raw segments with positions.

    The final accumulator is always returned, even if blank; callers decide
    whether a trailing blank segment counts.
    """
    pos = start.copy()

    segments = []
    current = _Accumulator(in_key=is_object)
    brace = 0
    bracket = 0
    in_string = False

    for ch in text[1:-1]:
        pos.advance(ch)

        if quote_aware and (in_string or ch == '"'):
            if ch == '"':
                in_string = not in_string
            current.push(ch, pos)
            continue

        if is_object and current.in_key and brace == 0 and bracket == 0 and ch in KEY_SEPARATORS:
            current.in_key = False
            continue

        if ch == "," and brace == 0 and bracket == 0:
            current.close(pos)
            segments.append(current)
            current = _Accumulator(in_key=is_object)
            continue

        if ch == "{":
            brace += 1
        elif ch == "}":
            brace -= 1
        elif ch == "[":
            bracket += 1
        elif ch == "]":
            bracket -= 1

        current.push(ch, pos)

    current.close(pos)
    segments.append(current)
    return segments


def split_object(text: str, start: Optional[Position] = None, quote_aware: bool = True) -> List[ObjectEntry]:
    """
    Split an object span into key/value entries.

    Args:
        text: Trimmed text starting with `{` and ending with `}`
        start: Position of the opening brace (default line 1, column 1)
        quote_aware: Treat double-quoted text as opaque

    Returns:
        Entries in source order. Empty middle segments become entries with
        an empty key and empty value; a blank trailing segment is dropped.

    Raises:
        MalformedStructureError: If `text` is not wrapped in curly braces
    """
    start = start or Position(1, 1)
    _check_brackets(text, "{", "}", start, "curly braces")

    accumulators = _scan(text, start, is_object=True, quote_aware=quote_aware)
    if accumulators[-1].is_blank():
        accumulators.pop()
    return [acc.entry() for acc in accumulators]


def split_array(text: str, start: Optional[Position] = None, quote_aware: bool = True) -> List[Segment]:
    """
    Split an array span into element segments.

    Empty middle elements are kept (they classify as null); a blank
    trailing element, as left by a trailing comma, is dropped.

    Raises:
        MalformedStructureError: If `text` is not wrapped in square brackets
    """
    start = start or Position(1, 1)
    _check_brackets(text, "[", "]", start, "square brackets")

    accumulators = _scan(text, start, is_object=False, quote_aware=quote_aware)
    if accumulators[-1].is_blank():
        accumulators.pop()
    return [acc.segment() for acc in accumulators]


__all__ = ["Segment", "ObjectEntry", "KEY_SEPARATORS", "split_object", "split_array"]
