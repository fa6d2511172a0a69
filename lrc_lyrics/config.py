from __future__ import annotations

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

DUPLICATE_TAG_POLICIES = ("first", "last")


@dataclass(frozen=True)
class LrcConfig:
    # Metadata: which tag survives when a label is inserted twice
    duplicate_tags: str = "first"

    # Export
    srt_last_line_ms: int = 2000

    # Logging
    log_level: str | None = None


def load_config() -> LrcConfig:
    duplicate_tags = os.getenv("LRC_LYRICS_DUPLICATE_TAGS", "first").strip().lower()
    if duplicate_tags not in DUPLICATE_TAG_POLICIES:
        logger.warning("Unknown duplicate tag policy '%s', using 'first'", duplicate_tags)
        duplicate_tags = "first"

    return LrcConfig(
        duplicate_tags=duplicate_tags,
        srt_last_line_ms=_int_env("LRC_LYRICS_SRT_LAST_LINE_MS", 2000),
        log_level=os.getenv("LRC_LYRICS_LOG_LEVEL") or None,
    )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s: %r, using %d", name, raw, default)
        return default
