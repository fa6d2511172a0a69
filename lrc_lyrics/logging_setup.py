from __future__ import annotations

import logging
import os

from lrc_lyrics.config import LrcConfig


def setup_logging(debug: bool = False, config: LrcConfig | None = None) -> None:
    level = logging.DEBUG if debug else logging.INFO
    # config.log_level wins; without a config the env var is read directly
    level_name = config.log_level if config is not None else os.getenv("LRC_LYRICS_LOG_LEVEL")
    if level_name:
        resolved = logging.getLevelName(level_name.upper())
        if isinstance(resolved, int):
            level = resolved

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
