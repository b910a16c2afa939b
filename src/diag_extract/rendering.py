"""Result presentation helpers."""

from __future__ import annotations

import json
from typing import Sequence

import yaml
from pydantic import JsonValue


def render_results(values: Sequence[JsonValue], fmt: str = "json") -> str:
    if fmt == "json":
        return json.dumps(list(values), indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            list(values),
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    raise ValueError(f"Unknown output format: {fmt}")
