"""Pydantic models for scanned fragments."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from diag_extract.models.scan_event import ScanIssue


class Fragment(BaseModel):
    start_index: int
    end_index: Optional[int] = None  # None when the closing tokens were synthesized
    text: str
    repaired: bool = False

    @property
    def truncated(self) -> bool:
        return self.end_index is None


class RepairResult(BaseModel):
    fragment: Optional[Fragment] = None
    issue: Optional[ScanIssue] = None
    position: Optional[int] = None
    trailing_pair_stripped: bool = False
