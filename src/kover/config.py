"""Runtime settings for kover.

All values have a sensible default and can be overridden with
environment variables:

    KOVER_LOG_LEVEL        logging level name (default WARNING)
    KOVER_MAX_LINE_LENGTH  longest accepted scene line, 0 = unlimited (default 0)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _get_int_env(name: str, default: int, minval: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_level_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    max_line_length: int | None = None


def get_settings() -> Settings:
    """Read settings from the environment."""
    max_len = _get_int_env("KOVER_MAX_LINE_LENGTH", 0, minval=0)
    return Settings(
        log_level=_get_level_env("KOVER_LOG_LEVEL", "WARNING"),
        max_line_length=max_len or None,
    )
