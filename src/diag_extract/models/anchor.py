"""Pydantic model for a located anchor."""

from __future__ import annotations

from pydantic import BaseModel


class Anchor(BaseModel):
    keyword: str
    keyword_index: int
    brace_index: int

    @property
    def keyword_end(self) -> int:
        return self.keyword_index + len(self.keyword)
