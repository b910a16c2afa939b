"""Helper for running extractions over host documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from diag_extract.csv_utils import unquote_csv_string
from diag_extract.errors import NothingFoundError
from diag_extract.input_adaptors import FileInput, InputAdaptor
from diag_extract.models.log_document import LogDocument
from diag_extract.models.result_set import ResultSet
from diag_extract.models.scan_config import ScanConfig
from diag_extract.scan_driver import extract_fragments, extract_incomplete_fragments


logger = logging.getLogger(__name__)

ScanMode = Literal["whole", "lines"]


class DiagnosticsExtractor:
    def __init__(self, config: ScanConfig | None = None) -> None:
        self.config: ScanConfig = config or ScanConfig()

    def extract(self, input_data: InputAdaptor | Path, mode: ScanMode = "whole") -> ResultSet:
        if isinstance(input_data, InputAdaptor):
            input_adaptor = input_data
        else:
            input_adaptor = FileInput(input_data)
        document = input_adaptor.load()
        logger.debug("Current file name: %s (kind: %s)", document.source_path, document.kind)

        result = self.scan(document, mode)
        if not result.found:
            raise NothingFoundError(document.source_path)
        if result.any_repaired:
            logger.warning("Some diagnostics in %s were truncated and repaired; data may be incomplete.", document.source_path)
        return result

    def scan(self, document: LogDocument, mode: ScanMode = "whole") -> ResultSet:
        is_csv = document.kind == "csv"
        if is_csv:
            logger.debug("CSV file detected. Unquoting CSV string...")
        if mode == "whole":
            text = unquote_csv_string(document.text) if is_csv else document.text
            return extract_fragments(text, self.config)
        if mode == "lines":
            lines = document.lines()
            if is_csv:
                lines = [unquote_csv_string(line) for line in lines]
            return extract_incomplete_fragments(lines, self.config)
        raise NotImplementedError(f"Unknown scan mode: {mode}")
