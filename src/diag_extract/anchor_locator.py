"""Locate the opening brace that follows an anchor keyword."""

from __future__ import annotations

import logging

from diag_extract.models.anchor import Anchor


logger = logging.getLogger(__name__)


def locate_anchor(text: str, keyword: str, start: int = 0) -> Anchor | None:
    """
    Find the first `keyword` at or after `start`, then the first "{" after the keyword.
    Returns None when either is missing; a keyword without a following brace ends the window.
    """
    keyword_index = text.find(keyword, start)
    if keyword_index == -1:
        return None
    brace_index = text.find("{", keyword_index + len(keyword))
    if brace_index == -1:
        logger.debug("Anchor %r at %d has no opening brace after it", keyword, keyword_index)
        return None
    return Anchor(keyword=keyword, keyword_index=keyword_index, brace_index=brace_index)
