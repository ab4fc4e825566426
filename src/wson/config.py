"""
Parser and serializer options.

Options are frozen dataclasses passed explicitly to each call. Nothing here
is global state; `from_env` only reads the environment when asked to.
"""

import os
from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 128
DEFAULT_INDENT = 4

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ParserOptions:
    """
    Options controlling `wson.loads`.

    Properties:
        max_depth:
            Maximum nesting of objects/arrays. The top-level document
            counts as depth 1. Deeper input raises NestingTooDeepError.

        quote_aware:
            If True, comment markers, commas, separators and brackets
            inside double-quoted text are treated as plain characters.
            If False, the legacy line-based behaviour is reproduced
            exactly: `"http://x"` loses everything from `//` onwards.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    quote_aware: bool = True

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> "ParserOptions":
        """
        Build options from WSON_MAX_DEPTH and WSON_LEGACY_COMMENTS.

        Raises:
            ValueError: If WSON_MAX_DEPTH is not a positive integer
        """
        max_depth = int(os.environ.get("WSON_MAX_DEPTH", DEFAULT_MAX_DEPTH))
        legacy = os.environ.get("WSON_LEGACY_COMMENTS", "").strip().lower() in _TRUTHY
        return cls(max_depth=max_depth, quote_aware=not legacy)


@dataclass(frozen=True)
class SerializerOptions:
    """
    Options controlling `wson.dumps`.

    Properties:
        indent: Spaces per nesting level
        max_depth: Maximum nesting rendered before failing
    """

    indent: int = DEFAULT_INDENT
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"indent must not be negative, got {self.indent}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


__all__ = ["DEFAULT_MAX_DEPTH", "DEFAULT_INDENT", "ParserOptions", "SerializerOptions"]
