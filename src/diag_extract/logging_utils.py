"""Logging setup for command-line use."""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "diag_extract"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LEVEL_ENV_VARS = ("DIAG_EXTRACT_LOG_LEVEL", "LOG_LEVEL")


def resolve_level(level: str | int | None = None) -> int:
    """
    Turn a level name or number into a logging level.
    Without an explicit level, DIAG_EXTRACT_LOG_LEVEL then LOG_LEVEL are consulted;
    unknown names fall back to INFO.
    """
    if level is None:
        level = next((os.environ[name] for name in LEVEL_ENV_VARS if os.environ.get(name)), "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Send scan diagnostics to stderr so stdout carries only rendered results."""
    resolved = resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)
    return logger
