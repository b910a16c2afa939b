from pathlib import Path

import pytest

from diag_extract.config import load_scan_config
from diag_extract.errors import ConfigError


def test_defaults_without_file() -> None:
    config = load_scan_config()

    assert config.anchor_keyword == "Diagnostics"
    assert config.gate_keyword == "Agent"


def test_yaml_file_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "scan.yaml"
    path.write_text("anchor_keyword: Trace\ngate_keyword: Request\n", encoding="utf-8")

    config = load_scan_config(path, gate_keyword="Session", anchor_keyword=None)

    assert config.anchor_keyword == "Trace"
    assert config.gate_keyword == "Session"


def test_empty_yaml_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "scan.yaml"
    path.write_text("", encoding="utf-8")

    assert load_scan_config(path).anchor_keyword == "Diagnostics"


def test_invalid_config_raises(tmp_path: Path) -> None:
    path = tmp_path / "scan.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_scan_config(path)

    with pytest.raises(ConfigError):
        load_scan_config(anchor_keyword="")


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_scan_config(tmp_path / "nope.yaml")


def test_malformed_yaml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "scan.yaml"
    path.write_text("anchor_keyword: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_scan_config(path)
