"""Public package exports."""

from diag_extract.extractor import DiagnosticsExtractor
from diag_extract.input_adaptors import FileInput
from diag_extract.input_adaptors import InputAdaptor
from diag_extract.input_adaptors import TextInput
from diag_extract.models import ResultSet
from diag_extract.models import ScanConfig
from diag_extract.scan_driver import extract_fragments
from diag_extract.scan_driver import extract_incomplete_fragments

__all__ = [
    "DiagnosticsExtractor",
    "FileInput",
    "InputAdaptor",
    "ResultSet",
    "ScanConfig",
    "TextInput",
    "extract_fragments",
    "extract_incomplete_fragments",
]
