"""Pydantic models for decode outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, Field, JsonValue

from diag_extract.models.fragment import Fragment


class DecodeStage(str, Enum):
    RAW = "raw"
    UNESCAPED = "unescaped"
    TRAILING_PAIR_STRIPPED = "trailing_pair_stripped"


class DecodeSuccess(BaseModel):
    kind: Literal["success"] = "success"
    value: JsonValue


class DecodeFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    message: str


DecodeOutcome: TypeAlias = Annotated[DecodeSuccess | DecodeFailure, Field(discriminator="kind")]


class DecodeAttempt(BaseModel):
    fragment: Fragment
    stage: DecodeStage = DecodeStage.RAW
    escaped_applied: bool = False
    outcome: DecodeOutcome

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, DecodeSuccess)
