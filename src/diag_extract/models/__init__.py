"""Model types for scan configuration, fragments and results."""

from diag_extract.models.anchor import Anchor
from diag_extract.models.decode_attempt import DecodeAttempt
from diag_extract.models.decode_attempt import DecodeFailure
from diag_extract.models.decode_attempt import DecodeOutcome
from diag_extract.models.decode_attempt import DecodeStage
from diag_extract.models.decode_attempt import DecodeSuccess
from diag_extract.models.fragment import Fragment
from diag_extract.models.fragment import RepairResult
from diag_extract.models.log_document import LogDocument
from diag_extract.models.result_set import ResultSet
from diag_extract.models.scan_config import ScanConfig
from diag_extract.models.scan_event import ScanEvent
from diag_extract.models.scan_event import ScanIssue

__all__ = [
    "Anchor",
    "DecodeAttempt",
    "DecodeFailure",
    "DecodeOutcome",
    "DecodeStage",
    "DecodeSuccess",
    "Fragment",
    "LogDocument",
    "RepairResult",
    "ResultSet",
    "ScanConfig",
    "ScanEvent",
    "ScanIssue",
]
