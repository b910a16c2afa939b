"""Input/output helpers."""

from __future__ import annotations

from pathlib import Path

from diag_extract.models.log_document import LogDocument

KIND_BY_SUFFIX = {".csv": "csv", ".log": "log"}


def file_kind(path: Path) -> str:
    return KIND_BY_SUFFIX.get(path.suffix.lower(), "text")


def load_document(path: Path, kind: str | None = None) -> LogDocument:
    if not path.exists():
        raise FileNotFoundError(path)
    txt = path.read_text(encoding="utf-8")
    return LogDocument(source_path=str(path), kind=kind or file_kind(path), text=txt)


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
