"""
Comment removal for WSON text.

Supported comment forms:
    // rest of line
    #  rest of line
    /* block, possibly spanning lines */

Comments are removed before any structural parsing. The result is the
surviving lines, right-trimmed, with blank lines dropped, joined by `\\n`.
Lines that break inside a double-quoted string are left as they are.
"""

from typing import Iterator, List, Tuple


def _lines(text: str) -> Iterator[str]:
    """Split on `\\n`, dropping a trailing `\\r` from each line."""
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def _strip_legacy(text: str) -> List[str]:
    """
    Line-based removal that does not know about strings.

    Block comments are removed first, then `//`, then `#`. A marker inside
    a quoted string is treated as a real comment.
    """
    lines = []
    in_block = False

    for line in _lines(text):
        if in_block:
            end = line.find("*/")
            if end == -1:
                continue
            line = line[end + 2:]
            in_block = False

        while True:
            start = line.find("/*")
            if start == -1:
                break
            end = line.find("*/", start + 2)
            if end == -1:
                line = line[:start]
                in_block = True
                break
            line = line[:start] + line[end + 2:]

        index = line.find("//")
        if index == -1:
            index = line.find("#")
        if index != -1:
            line = line[:index]

        lines.append(line)

    return lines


def _strip_quote_aware(text: str) -> List[Tuple[str, bool]]:
    """
    Positional removal that leaves double-quoted text untouched.

    The earliest marker on a line wins: `a // b /*` does not open a block
    and `a # b // c` keeps only `a`. Quote state carries over line breaks,
    like block-comment state.

    Returns:
        (line, open) pairs, where `open` is True if the line break after
        the line falls inside a string
    """
    lines = []
    in_block = False
    in_string = False

    for line in _lines(text):
        kept = []
        i = 0
        n = len(line)

        while i < n:
            if in_block:
                end = line.find("*/", i)
                if end == -1:
                    break
                in_block = False
                i = end + 2
                continue

            ch = line[i]
            if ch == '"':
                in_string = not in_string
            elif not in_string:
                if line.startswith("/*", i):
                    in_block = True
                    i += 2
                    continue
                if ch == "#" or line.startswith("//", i):
                    break

            kept.append(ch)
            i += 1

        lines.append(("".join(kept), in_string))

    return lines


def strip_comments(text: str, quote_aware: bool = True) -> str:
    """
    Remove all comments from WSON text.

    Args:
        text: Raw WSON text
        quote_aware: If False, comment markers inside strings are stripped
            too (legacy behaviour)

    Returns:
        Comment-free text with blank lines removed. In quote-aware mode a
        line that ends inside a string is kept exactly as written.
    """
    if quote_aware:
        lines = _strip_quote_aware(text)
    else:
        lines = [(line, False) for line in _strip_legacy(text)]

    kept = []
    for line, open_string in lines:
        if open_string:
            kept.append(line)
        elif line.strip():
            kept.append(line.rstrip())
    return "\n".join(kept)


__all__ = ["strip_comments"]
