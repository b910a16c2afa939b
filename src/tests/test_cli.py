import json
from pathlib import Path

import pytest
import yaml

from diag_extract.cli import main
from diag_extract.csv_utils import unquote_csv_string
from diag_extract.rendering import render_results


def test_render_results_json_uses_two_space_indent() -> None:
    assert render_results([{"a": 1}]) == '[\n  {\n    "a": 1\n  }\n]\n'


def test_render_results_rejects_unknown_format() -> None:
    with pytest.raises(ValueError):
        render_results([], "xml")


def test_unquote_csv_string() -> None:
    assert unquote_csv_string('"say ""hi"""') == 'say "hi"'
    assert unquote_csv_string('no ""outer"" quotes') == 'no "outer" quotes'
    assert unquote_csv_string('"') == '"'


def test_cli_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--input-text", 'x Diagnostics {"Agent": 1} y'])

    out = capsys.readouterr().out
    assert code == 0
    assert json.loads(out) == [{"Agent": 1}]


def test_cli_nothing_found(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--input-text", "nothing to see"])

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "No valid diagnostics found" in captured.err


def test_cli_line_mode_warns_about_repair(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--input-text", 'Agent {"a": 1, "b": "tru', "--mode", "lines"])

    captured = capsys.readouterr()
    assert code == 0
    assert json.loads(captured.out) == [{"a": 1, "b": "tru"}]
    assert "repaired" in captured.err


def test_cli_writes_yaml_output_file(tmp_path: Path) -> None:
    out_path = tmp_path / "out" / "result.yaml"
    code = main(
        [
            "--input-text",
            'Trace {"id": 3}',
            "--anchor",
            "Trace",
            "--gate",
            "id",
            "--format",
            "yaml",
            "--output",
            str(out_path),
        ]
    )

    assert code == 0
    assert yaml.safe_load(out_path.read_text(encoding="utf-8")) == [{"id": 3}]


def test_cli_reads_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "scan.yaml"
    config_path.write_text("anchor_keyword: Req\ngate_keyword: ''\n", encoding="utf-8")
    log_path = tmp_path / "app.log"
    log_path.write_text('Req {"a": 1}\n', encoding="utf-8")

    code = main(["--input", str(log_path), "--config", str(config_path)])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"a": 1}]


def test_cli_missing_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--input", str(tmp_path / "missing.log")])

    assert code == 2
    assert "Error" in capsys.readouterr().err


def test_cli_malformed_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "scan.yaml"
    config_path.write_text("anchor_keyword: [unclosed\n", encoding="utf-8")

    code = main(["--input-text", 'Diagnostics {"Agent": 1}', "--config", str(config_path)])

    assert code == 2
    assert "not valid YAML" in capsys.readouterr().err


def test_cli_kind_csv_unquotes_inline_text(capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--input-text", '"Diagnostics {""Agent"": 1}"', "--kind", "csv"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"Agent": 1}]


def test_cli_kind_overrides_file_extension(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_path = tmp_path / "export.txt"
    log_path.write_text('"Agent {""a"": 1,"\n', encoding="utf-8")

    code = main(["--input", str(log_path), "--kind", "csv", "--mode", "lines"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == [{"a": 1}]
