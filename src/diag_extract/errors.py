"""Exceptions surfaced to the host."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for extraction failures reported to the user."""


class NothingFoundError(ExtractionError):
    def __init__(self, source_path: str) -> None:
        super().__init__(f"No valid diagnostics found in {source_path}.")
        self.source_path = source_path


class ConfigError(ValueError):
    """Raised when a scan configuration file is unusable."""
