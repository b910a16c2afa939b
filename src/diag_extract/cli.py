"""CLI entrypoint."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from diag_extract.config import load_scan_config
from diag_extract.errors import ConfigError, NothingFoundError
from diag_extract.extractor import DiagnosticsExtractor
from diag_extract.input_adaptors import FileInput, InputAdaptor, TextInput
from diag_extract.io_utils import write_output
from diag_extract.logging_utils import setup_logging
from diag_extract.rendering import render_results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="diag-extract")
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("--input", type=str, help="Path to a log file")
    input_group.add_argument("--input-text", type=str, help="Raw log text")
    parser.add_argument("--kind", choices=["csv", "log", "text"], default=None, help="Document kind; defaults to the file extension, or text for --input-text")
    parser.add_argument("--mode", choices=["whole", "lines"], default="whole", help="Scan the whole buffer or line by line with repair")
    parser.add_argument("--anchor", type=str, default=None, help="Keyword preceding each object")
    parser.add_argument("--gate", type=str, default=None, help="Keyword each object must contain")
    parser.add_argument("--config", type=str, default=None, help="YAML file with anchor_keyword/gate_keyword")
    parser.add_argument("--format", choices=["json", "yaml"], default="json")
    parser.add_argument("--output", type=str, default=None, help="Write results to this file instead of stdout")
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = load_scan_config(
            Path(args.config) if args.config else None,
            anchor_keyword=args.anchor,
            gate_keyword=args.gate,
        )
        input_adaptor: InputAdaptor
        if args.input_text is not None:
            input_adaptor = TextInput(args.input_text, kind=args.kind or "text")
        else:
            input_adaptor = FileInput(Path(args.input), kind=args.kind)
        result = DiagnosticsExtractor(config).extract(input_adaptor, mode=args.mode)
    except NothingFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (ConfigError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if result.any_repaired:
        print("Warning: some entries were truncated and have been repaired; data may be incomplete.", file=sys.stderr)

    rendered = render_results(result.values, args.format)
    if args.output:
        write_output(Path(args.output), rendered)
    else:
        sys.stdout.write(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
