"""Scan issue taxonomy and per-fragment diagnostic records."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ScanIssue(str, Enum):
    ANCHOR_NOT_FOUND = "anchor_not_found"
    UNTERMINATED = "unterminated"
    MISMATCHED_DELIMITER = "mismatched_delimiter"
    DECODE_SYNTAX_ERROR = "decode_syntax_error"
    GATE_KEYWORD_ABSENT = "gate_keyword_absent"


class ScanEvent(BaseModel):
    issue: ScanIssue
    position: Optional[int] = None
    line_number: Optional[int] = None
    detail: str = ""
