"""
Line/column tracking for diagnostics.

Positions refer to the comment-stripped text the structural scan works on.
"""

from dataclasses import dataclass


@dataclass
class Position:
    """
    Mutable cursor over the scanned text.

    `column` counts the characters consumed on the current line; a newline
    moves to the next line and resets it to 0. The position of a character
    is the cursor right after consuming it, so the first character of any
    line is column 1.
    """

    line: int = 1
    column: int = 0

    def advance(self, ch: str) -> None:
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    def copy(self) -> "Position":
        return Position(self.line, self.column)

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


__all__ = ["Position"]
