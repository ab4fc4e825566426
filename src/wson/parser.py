"""
WSON Parser (Raw Text → Document).

Pipeline:
    1. strip comments                (wson.comments)
    2. split the top-level object    (wson.splitter)
    3. classify every value          (wson.classifier)
    4. recurse into nested objects and arrays

Parsing is fail-fast. The first malformed value aborts the whole document
and its error propagates unchanged; no partial tree is ever returned.

Example:
    >>> parse('{ name = "Alice", age = 30 }')
    Document({'age': Int(value=30), 'name': String(value='Alice')})
"""

from typing import Optional

from wson.classifier import classify
from wson.comments import strip_comments
from wson.config import ParserOptions
from wson.errors import NestingTooDeepError
from wson.log import get_logger
from wson.position import Position
from wson.splitter import split_array, split_object
from wson.values import Array, Document, Object

logger = get_logger("parser")


class _TreeBuilder:
    """
    Builds the value tree for a single parse call.

    Holds the current nesting depth, so a new builder is created per call.
    """

    def __init__(self, options: ParserOptions):
        self.options = options
        self.depth = 0

    def _enter(self, position: Position) -> None:
        if self.depth >= self.options.max_depth:
            raise NestingTooDeepError(self.options.max_depth, position.line, position.column)
        self.depth += 1

    def build_document(self, text: str, position: Position) -> Document:
        self._enter(position)
        try:
            document = Document()
            for entry in split_object(text, position, quote_aware=self.options.quote_aware):
                document[entry.key] = classify(entry.value.text, entry.value.position, self)
            return document
        finally:
            self.depth -= 1

    def build_object(self, text: str, position: Position) -> Object:
        return Object(self.build_document(text, position))

    def build_array(self, text: str, position: Position) -> Array:
        self._enter(position)
        try:
            segments = split_array(text, position, quote_aware=self.options.quote_aware)
            return Array(tuple(classify(s.text, s.position, self) for s in segments))
        finally:
            self.depth -= 1


class Parser:
    """
    Parses WSON text into a Document.

    A Parser holds only its options and can be reused for any number of
    independent calls.
    """

    def __init__(self, options: Optional[ParserOptions] = None):
        self.options = options or ParserOptions()

    def parse(self, text: str) -> Document:
        """
        Parse WSON text.

        Args:
            text: Complete WSON document

        Returns:
            Document with keys in sorted order

        Raises:
            MalformedStructureError: If the document is not wrapped in braces
            InvalidValueError: If a value matches no literal kind
            NestingTooDeepError: If nesting exceeds options.max_depth
        """
        cleaned = strip_comments(text, quote_aware=self.options.quote_aware)
        content = cleaned.strip()

        # Position of the opening brace: skip leading whitespace, consume it.
        start = Position()
        for ch in cleaned[: len(cleaned) - len(cleaned.lstrip()) + 1]:
            start.advance(ch)

        builder = _TreeBuilder(self.options)
        try:
            document = builder.build_document(content, start)
        except RecursionError:
            raise NestingTooDeepError(self.options.max_depth) from None

        logger.debug("Parsed document with %d top-level keys", len(document))
        return document


def parse(text: str, options: Optional[ParserOptions] = None) -> Document:
    """Parse WSON text with a fresh Parser."""
    return Parser(options).parse(text)


__all__ = ["Parser", "parse"]
