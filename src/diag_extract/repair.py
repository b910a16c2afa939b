"""Quote-aware fragment scanning with synthetic closure of truncated objects."""

from __future__ import annotations

import logging
import re

from diag_extract.decoding import decode_json
from diag_extract.models.decode_attempt import DecodeSuccess
from diag_extract.models.fragment import Fragment, RepairResult
from diag_extract.models.scan_event import ScanIssue


logger = logging.getLogger(__name__)

QUOTE_CHARS = ("\"", "'")
CLOSERS = {"{": "}", "[": "]", "\"": "\"", "'": "'"}
OPENERS = {"}": "{", "]": "["}

# A complete trailing member: quoted key, colon, non-empty value.
TRAILING_PAIR_RE = re.compile(r"^\s*\"[^\"]*\"\s*:\s*\S", re.DOTALL)


def closing_tokens(stack: list[str]) -> str:
    return "".join(CLOSERS[token] for token in reversed(stack))


def scan_fragment(line: str, start: int) -> RepairResult:
    """
    Scan from the "{" at `start`, tracking braces, brackets and quotes on one stack.

    Inside a quoted run only the same quote character (unescaped) closes it; everything
    else is literal. A "}" or "]" that does not match the stack top rejects the fragment.
    Reaching the end of the line with open tokens synthesizes their closers in reverse.
    """
    stack: list[str] = []
    escape = False
    for i in range(start, len(line)):
        ch = line[i]
        top = stack[-1] if stack else None
        if top in QUOTE_CHARS:
            if escape:
                escape = False
            elif ch == "\\":
                escape = True
            elif ch == top:
                stack.pop()
            continue
        if ch in QUOTE_CHARS or ch in ("{", "["):
            stack.append(ch)
        elif ch in OPENERS:
            if top != OPENERS[ch]:
                logger.debug("Mismatched %r at %d (open token %r)", ch, i, top)
                return RepairResult(issue=ScanIssue.MISMATCHED_DELIMITER, position=i)
            stack.pop()
            if not stack:
                return RepairResult(
                    fragment=Fragment(start_index=start, end_index=i, text=line[start : i + 1])
                )

    body = line[start:]
    if escape:
        # A dangling backslash would escape the synthesized quote.
        body = body[:-1]
    text = body + closing_tokens(stack)
    logger.debug("Truncated fragment at %d closed with %r", start, closing_tokens(stack))
    return RepairResult(
        fragment=Fragment(start_index=start, end_index=None, text=text, repaired=True),
        issue=ScanIssue.UNTERMINATED,
        position=len(line),
    )


def strip_trailing_pair(text: str) -> str | None:
    """
    Remove an incomplete last member before the final "}".
    Returns the shortened text, or None when the heuristic does not apply.
    """
    if not text.endswith("}") or "," not in text:
        return None
    comma = text.rfind(",", 0, len(text) - 1)
    if comma == -1:
        return None
    tail = text[comma + 1 : -1]
    if TRAILING_PAIR_RE.match(tail):
        return None
    return text[:comma] + text[-1]


def repair_line(line: str, gate_keyword: str) -> RepairResult:
    """Produce a decodable candidate fragment from one line, repairing it where possible."""
    if gate_keyword not in line:
        return RepairResult(issue=ScanIssue.GATE_KEYWORD_ABSENT)
    start = line.find("{")
    if start == -1:
        return RepairResult(issue=ScanIssue.ANCHOR_NOT_FOUND)

    result = scan_fragment(line, start)
    fragment = result.fragment
    if fragment is None:
        return result

    if isinstance(decode_json(fragment.text), DecodeSuccess):
        return result
    stripped = strip_trailing_pair(fragment.text)
    if stripped is None:
        return result
    logger.debug("Stripped incomplete trailing member: %r -> %r", fragment.text, stripped)
    return result.model_copy(
        update={
            "fragment": fragment.model_copy(update={"text": stripped, "repaired": True}),
            "trailing_pair_stripped": True,
        }
    )
