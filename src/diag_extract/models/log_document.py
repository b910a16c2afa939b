"""Pydantic model for a log document supplied by the host."""

from __future__ import annotations

import re

from pydantic import BaseModel

# Only newline terminators; U+2028 and friends may appear unescaped inside JSON strings.
LINE_BREAK_RE = re.compile(r"\r?\n")


class LogDocument(BaseModel):
    source_path: str
    kind: str  # "csv", "log" or "text"
    text: str

    def lines(self) -> list[str]:
        lines = LINE_BREAK_RE.split(self.text)
        if lines and lines[-1] == "":
            lines.pop()
        return lines
