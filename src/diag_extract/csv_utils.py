"""CSV field unquoting."""

from __future__ import annotations


def unquote_csv_string(text: str) -> str:
    """Strip one pair of surrounding double quotes and collapse doubled quotes."""
    if len(text) >= 2 and text.startswith("\"") and text.endswith("\""):
        text = text[1:-1]
    return text.replace("\"\"", "\"")
