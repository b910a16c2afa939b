"""Input adaptors for log documents."""

from __future__ import annotations

from pathlib import Path

from diag_extract.io_utils import load_document
from diag_extract.models.log_document import LogDocument


class InputAdaptor:
    def load(self) -> LogDocument:
        raise NotImplementedError("InputAdaptor.load must be implemented by subclasses.")


class FileInput(InputAdaptor):
    def __init__(self, path: Path, kind: str | None = None) -> None:
        self._document = load_document(path, kind)

    def load(self) -> LogDocument:
        return self._document


class TextInput(InputAdaptor):
    def __init__(self, text: str, kind: str = "text") -> None:
        self._text = text
        self._kind = kind

    def load(self) -> LogDocument:
        return LogDocument(source_path="inline_input.txt", kind=self._kind, text=self._text)
