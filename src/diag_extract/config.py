"""Scan configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from diag_extract.errors import ConfigError
from diag_extract.models.scan_config import ScanConfig


def load_scan_config(path: Path | None = None, **overrides: Any) -> ScanConfig:
    """
    Build a ScanConfig from an optional YAML file plus keyword overrides.
    Overrides set to None are ignored.
    """
    data: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Missing config file: {path}")
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a mapping.")
        data.update(raw)
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ScanConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid scan configuration: {exc}") from exc
