"""Pydantic model for scan configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScanConfig(BaseModel):
    anchor_keyword: str = Field(default="Diagnostics", min_length=1)
    gate_keyword: str = "Agent"  # empty string disables the gate
