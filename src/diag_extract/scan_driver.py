"""Whole-buffer and line-wise extraction loops."""

from __future__ import annotations

import logging
from typing import Iterable

from diag_extract.anchor_locator import locate_anchor
from diag_extract.balanced_scan import find_balanced_end
from diag_extract.decoding import DecodeRetryController
from diag_extract.models.decode_attempt import DecodeStage, DecodeSuccess
from diag_extract.models.fragment import Fragment
from diag_extract.models.result_set import ResultSet
from diag_extract.models.scan_config import ScanConfig
from diag_extract.models.scan_event import ScanEvent, ScanIssue
from diag_extract.repair import repair_line


logger = logging.getLogger(__name__)


def extract_fragments(text: str, config: ScanConfig | None = None) -> ResultSet:
    """
    Decode every anchored, gated object in `text`.

    The cursor only moves forward: past the fragment on success or when the gate keyword is
    absent, past the anchor keyword when decoding fails. An unterminated object ends the scan.
    """
    cfg = config or ScanConfig()
    controller = DecodeRetryController(allow_unescape=True)
    result = ResultSet()
    cursor = 0

    while cursor < len(text):
        anchor = locate_anchor(text, cfg.anchor_keyword, cursor)
        if anchor is None:
            result.events.append(ScanEvent(issue=ScanIssue.ANCHOR_NOT_FOUND, position=cursor))
            break
        end = find_balanced_end(text, anchor.brace_index)
        if end is None:
            logger.debug("Unterminated object starting at %d", anchor.brace_index)
            result.events.append(ScanEvent(issue=ScanIssue.UNTERMINATED, position=anchor.brace_index))
            break
        logger.debug("Fragment bounds: start=%d end=%d", anchor.brace_index, end)

        fragment = Fragment(start_index=anchor.brace_index, end_index=end, text=text[anchor.brace_index : end + 1])
        if cfg.gate_keyword not in fragment.text:
            result.events.append(ScanEvent(issue=ScanIssue.GATE_KEYWORD_ABSENT, position=fragment.start_index))
            cursor = end + 1
            continue

        attempts = controller.resolve(fragment)
        result.attempts.extend(attempts)
        final = attempts[-1]
        if isinstance(final.outcome, DecodeSuccess):
            result.values.append(final.outcome.value)
            cursor = end + 1
        else:
            logger.info("Dropping undecodable fragment at %d: %s", fragment.start_index, final.outcome.message)
            result.events.append(
                ScanEvent(
                    issue=ScanIssue.DECODE_SYNTAX_ERROR,
                    position=fragment.start_index,
                    detail=final.outcome.message,
                )
            )
            # The match itself may be spurious; resume just past the keyword.
            cursor = anchor.keyword_end

    return result


def extract_incomplete_fragments(lines: Iterable[str], config: ScanConfig | None = None) -> ResultSet:
    """Repair and decode one fragment per line; failures never stop the scan."""
    cfg = config or ScanConfig()
    controller = DecodeRetryController(allow_unescape=False)
    result = ResultSet()

    for line_number, line in enumerate(lines, start=1):
        repair = repair_line(line, cfg.gate_keyword)
        if repair.issue is not None:
            result.events.append(ScanEvent(issue=repair.issue, position=repair.position, line_number=line_number))
        fragment = repair.fragment
        if fragment is None:
            continue

        stage = DecodeStage.TRAILING_PAIR_STRIPPED if repair.trailing_pair_stripped else DecodeStage.RAW
        attempts = controller.resolve(fragment, stage=stage)
        result.attempts.extend(attempts)
        final = attempts[-1]
        if isinstance(final.outcome, DecodeSuccess):
            result.values.append(final.outcome.value)
            if fragment.repaired:
                result.any_repaired = True
        else:
            logger.info("Line %d: dropping undecodable fragment: %s", line_number, final.outcome.message)
            result.events.append(
                ScanEvent(
                    issue=ScanIssue.DECODE_SYNTAX_ERROR,
                    position=fragment.start_index,
                    line_number=line_number,
                    detail=final.outcome.message,
                )
            )

    return result
