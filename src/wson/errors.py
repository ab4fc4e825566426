"""
Exception hierarchy for the WSON engine.

Parsing is fail-fast: the first problem aborts the whole document and the
exception raised deep inside the recursion reaches the caller unchanged.
"""

from typing import Optional


class WsonError(Exception):
    """Base exception for the wson package."""
    pass


class WsonParseError(WsonError):
    """
    Raised when WSON text cannot be parsed.

    Properties:
        message: Human-readable description
        line: 1-based line in the comment-stripped text (optional)
        column: Column in the comment-stripped text (optional)
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"{self.message} (line {self.line}, column {self.column})"
        return self.message


class MalformedStructureError(WsonParseError):
    """Raised when an object or array span is not wrapped in its brackets."""
    pass


class InvalidValueError(WsonParseError):
    """Raised when no rule of the classification cascade matches a value."""

    def __init__(self, text: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(f"Invalid value: {text}", line, column)
        self.text = text


class NestingTooDeepError(WsonParseError):
    """Raised when objects/arrays nest deeper than the configured maximum."""

    def __init__(self, max_depth: int, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(f"Nesting exceeds maximum depth of {max_depth}", line, column)
        self.max_depth = max_depth


class WsonSerializeError(WsonError):
    """Raised when a document cannot be rendered as WSON text."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = [
    "WsonError",
    "WsonParseError",
    "MalformedStructureError",
    "InvalidValueError",
    "NestingTooDeepError",
    "WsonSerializeError",
]
