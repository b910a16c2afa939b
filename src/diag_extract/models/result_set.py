"""Pydantic model for the values collected by one scan."""

from __future__ import annotations

from pydantic import BaseModel, Field, JsonValue

from diag_extract.models.decode_attempt import DecodeAttempt
from diag_extract.models.scan_event import ScanEvent


class ResultSet(BaseModel):
    values: list[JsonValue] = Field(default_factory=list)
    any_repaired: bool = False
    attempts: list[DecodeAttempt] = Field(default_factory=list)
    events: list[ScanEvent] = Field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.values)
