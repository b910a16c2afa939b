"""Brace-only balanced pair scanning."""

from __future__ import annotations


def find_balanced_end(text: str, start: int) -> int | None:
    """
    Return the index of the "}" that closes the "{" at `start`, or None if the text ends first.

    Only braces are counted. Braces inside string literals are not exempt, so a quoted "}"
    closes a level just like a structural one.
    """
    if start >= len(text) or text[start] != "{":
        raise ValueError(f"Expected '{{' at index {start}.")

    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None
