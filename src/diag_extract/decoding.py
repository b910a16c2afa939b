"""JSON decoding with an explicit unescape retry ladder."""

from __future__ import annotations

import json
import logging
from enum import Enum

from diag_extract.models.decode_attempt import (
    DecodeAttempt,
    DecodeFailure,
    DecodeOutcome,
    DecodeStage,
    DecodeSuccess,
)
from diag_extract.models.fragment import Fragment


logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    raise ValueError(f"Non-standard JSON constant {name!r}")


def decode_json(text: str) -> DecodeOutcome:
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError is a ValueError subclass; deep nesting exhausts the recursion limit.
        return DecodeFailure(message=str(exc) or type(exc).__name__)
    # json.loads output is already valid JSON; skip re-validating nested values.
    return DecodeSuccess.model_construct(value=value)


def unescape_json_in_string(text: str) -> str:
    """Undo one level of string escaping: \\" becomes " and \\\\ becomes \\."""
    return text.replace("\\\"", "\"").replace("\\\\", "\\")


class RetryState(str, Enum):
    RAW = "raw"
    UNESCAPED = "unescaped"
    FAILED = "failed"


class DecodeRetryController:
    """
    Decode a fragment as-is, then once more after unescaping.

    Each call owns its state; the unescape step is entered at most once per fragment.
    """

    def __init__(self, *, allow_unescape: bool = True) -> None:
        self._allow_unescape: bool = allow_unescape

    def resolve(self, fragment: Fragment, stage: DecodeStage = DecodeStage.RAW) -> list[DecodeAttempt]:
        attempts: list[DecodeAttempt] = []
        state = RetryState.RAW
        text = fragment.text
        while state is not RetryState.FAILED:
            escaped = state is RetryState.UNESCAPED
            attempt = DecodeAttempt(
                fragment=fragment,
                stage=DecodeStage.UNESCAPED if escaped else stage,
                escaped_applied=escaped,
                outcome=decode_json(text),
            )
            attempts.append(attempt)
            if attempt.succeeded:
                return attempts
            logger.debug("Decode failed at %s stage: %s", attempt.stage.value, attempt.outcome.message)
            if state is RetryState.RAW and self._allow_unescape:
                logger.debug("Retrying fragment at %d after unescaping", fragment.start_index)
                state = RetryState.UNESCAPED
                text = unescape_json_in_string(fragment.text)
            else:
                state = RetryState.FAILED
        return attempts
